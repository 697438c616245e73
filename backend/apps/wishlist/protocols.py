from __future__ import annotations

from typing import List, Protocol

from apps.common.result import Result

from .dtos import WishlistItem


class WishlistRepositoryProtocol(Protocol):
    def load(self) -> Result[List[WishlistItem]]:
        ...

    def save(self, items: List[WishlistItem]) -> Result[List[WishlistItem]]:
        ...
