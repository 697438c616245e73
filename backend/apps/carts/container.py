from __future__ import annotations

from apps.storage.backends import SessionStorage
from apps.storage.protocols import KeyValueStorageProtocol

from .repositories import StorageCartRepository
from .services import CartService


def build_cart_service(storage: KeyValueStorageProtocol) -> CartService:
    return CartService(carts=StorageCartRepository(storage))


def build_cart_service_for_request(request) -> CartService:
    return build_cart_service(SessionStorage(request.session))
