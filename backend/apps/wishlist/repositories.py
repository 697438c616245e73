from typing import List, Optional

from django.conf import settings

from apps.common.repository import InMemoryListRepository, JsonListRepository
from apps.storage.protocols import KeyValueStorageProtocol

from .dtos import WishlistItem
from .mappers import WishlistItemMapper

DEFAULT_WISHLIST_KEY = "danl_wishlist"


def wishlist_storage_key() -> str:
    return getattr(settings, "WISHLIST_STORAGE_KEY", DEFAULT_WISHLIST_KEY) or DEFAULT_WISHLIST_KEY


class StorageWishlistRepository(JsonListRepository[WishlistItem]):
    def __init__(self, storage: KeyValueStorageProtocol, key: Optional[str] = None):
        super().__init__(
            storage,
            key or wishlist_storage_key(),
            decode=WishlistItemMapper.from_dict,
            encode=WishlistItemMapper.to_dict,
        )


class InMemoryWishlistRepository(InMemoryListRepository[WishlistItem]):
    def __init__(self, items: Optional[List[WishlistItem]] = None):
        super().__init__(
            decode=WishlistItemMapper.from_dict,
            encode=WishlistItemMapper.to_dict,
            items=items,
        )
