from typing import List, Optional

from django.conf import settings

from apps.common.repository import InMemoryListRepository, JsonListRepository
from apps.storage.protocols import KeyValueStorageProtocol

from .dtos import CartItem
from .mappers import CartItemMapper

DEFAULT_CART_KEY = "danl_cart"


def cart_storage_key() -> str:
    return getattr(settings, "CART_STORAGE_KEY", DEFAULT_CART_KEY) or DEFAULT_CART_KEY


class StorageCartRepository(JsonListRepository[CartItem]):
    def __init__(self, storage: KeyValueStorageProtocol, key: Optional[str] = None):
        super().__init__(
            storage,
            key or cart_storage_key(),
            decode=CartItemMapper.from_dict,
            encode=CartItemMapper.to_dict,
        )


class InMemoryCartRepository(InMemoryListRepository[CartItem]):
    def __init__(self, items: Optional[List[CartItem]] = None):
        super().__init__(
            decode=CartItemMapper.from_dict,
            encode=CartItemMapper.to_dict,
            items=items,
        )
