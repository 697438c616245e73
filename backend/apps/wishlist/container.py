from __future__ import annotations

from apps.storage.backends import SessionStorage
from apps.storage.protocols import KeyValueStorageProtocol

from .repositories import StorageWishlistRepository
from .services import WishlistService


def build_wishlist_service(storage: KeyValueStorageProtocol) -> WishlistService:
    return WishlistService(wishlist=StorageWishlistRepository(storage))


def build_wishlist_service_for_request(request) -> WishlistService:
    return build_wishlist_service(SessionStorage(request.session))
