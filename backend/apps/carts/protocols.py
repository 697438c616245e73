from __future__ import annotations

from typing import List, Protocol

from apps.common.result import Result

from .dtos import CartItem


class CartRepositoryProtocol(Protocol):
    def load(self) -> Result[List[CartItem]]:
        ...

    def save(self, items: List[CartItem]) -> Result[List[CartItem]]:
        ...
