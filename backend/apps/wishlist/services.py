from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, List, Optional, Tuple, Union

from apps.common import get_logger
from apps.common.result import Err, ErrorKind, Ok, Result

from .dtos import WishlistItem
from .mappers import WishlistItemMapper
from .protocols import WishlistRepositoryProtocol

logger = get_logger(__name__).bind(component="wishlist", layer="service")

ProductInput = Union[WishlistItem, Dict[str, Any]]


class WishlistService:
    """Saved-for-later products with set semantics keyed by product slug."""

    def __init__(self, wishlist: WishlistRepositoryProtocol):
        self.wishlist = wishlist
        self.logger = logger.bind(service="WishlistService")

    def _current(self) -> Tuple[List[WishlistItem], Optional[Err]]:
        loaded = self.wishlist.load()
        if loaded.ok:
            return list(loaded.value), None
        return list(loaded.fallback or []), loaded

    def _persist(self, items: List[WishlistItem]) -> Result[List[WishlistItem]]:
        saved = self.wishlist.save(items)
        if not saved.ok:
            self.logger.warning(
                "Wishlist change kept in memory only", kind=saved.kind.value, size=len(items)
            )
        return saved

    @staticmethod
    def _to_item(product: ProductInput) -> Optional[WishlistItem]:
        if isinstance(product, WishlistItem):
            return replace(product, extra=dict(product.extra))
        if isinstance(product, dict):
            return WishlistItemMapper.from_dict(product)
        return None

    def get_wishlist(self) -> Result[List[WishlistItem]]:
        return self.wishlist.load()

    def add_item(self, product: ProductInput) -> Result[List[WishlistItem]]:
        items, error = self._current()
        item = self._to_item(product)
        if item is None:
            self.logger.warning("Rejected wishlist add without product slug")
            return Err(ErrorKind.INVALID_ITEM, "Product slug is required", fallback=items)
        if any(existing.product_slug == item.product_slug for existing in items):
            self.logger.debug("Wishlist already contains product", slug=item.product_slug)
            return error if error is not None else Ok(items)
        items.append(item)
        self.logger.debug("Added product to wishlist", slug=item.product_slug)
        return self._persist(items)

    def remove_item(self, product_slug: str) -> Result[List[WishlistItem]]:
        items, _ = self._current()
        remaining = [i for i in items if i.product_slug != product_slug]
        return self._persist(remaining)

    def is_in_wishlist(self, product_slug: str) -> bool:
        items, _ = self._current()
        return any(i.product_slug == product_slug for i in items)

    def toggle_wishlist(self, product: ProductInput) -> Result[List[WishlistItem]]:
        item = self._to_item(product)
        if item is None:
            items, _ = self._current()
            return Err(ErrorKind.INVALID_ITEM, "Product slug is required", fallback=items)
        if self.is_in_wishlist(item.product_slug):
            self.logger.info("Toggled product out of wishlist", slug=item.product_slug)
            return self.remove_item(item.product_slug)
        self.logger.info("Toggled product into wishlist", slug=item.product_slug)
        return self.add_item(item)

    def get_count(self) -> Result[int]:
        items, error = self._current()
        count = len({i.product_slug for i in items})
        return error.with_fallback(count) if error is not None else Ok(count)

    def clear_wishlist(self) -> Result[List[WishlistItem]]:
        self.logger.info("Clearing wishlist")
        return self._persist([])
