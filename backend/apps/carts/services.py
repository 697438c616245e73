from __future__ import annotations

import math
from dataclasses import replace
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Iterable, List, Tuple, Union

from apps.common import get_logger
from apps.common.result import Err, ErrorKind, Ok, Result

from .commands import CartAddCommand, QuantityUpdateCommand
from .dtos import CartItem
from .protocols import CartRepositoryProtocol

logger = get_logger(__name__).bind(component="carts", layer="service")

ZERO = Decimal("0")
# Prices beyond this are treated as unreadable
MAX_PRICE = Decimal("1e12")


def item_price(item: CartItem) -> Decimal:
    """Numeric price of a line; missing, non-numeric and non-finite prices count as zero."""
    raw = item.price
    if raw is None or isinstance(raw, bool):
        return ZERO
    if isinstance(raw, float):
        if math.isnan(raw) or math.isinf(raw):
            return ZERO
        raw = repr(raw)
    try:
        value = Decimal(str(raw).strip())
    except (InvalidOperation, ValueError):
        return ZERO
    if not value.is_finite() or abs(value) > MAX_PRICE:
        return ZERO
    return value


def cart_total(items: Iterable[CartItem]) -> Decimal:
    try:
        return sum((item_price(i) * i.quantity for i in items), ZERO)
    except ArithmeticError as exc:
        logger.warning("Cart total out of range; reporting zero", error=repr(exc))
        return ZERO


def cart_count(items: Iterable[CartItem]) -> int:
    return sum(i.quantity for i in items)


def same_id(left, right) -> bool:
    # Path parameters arrive as strings while stored ids may be numeric
    return left == right or str(left) == str(right)


class CartService:
    def __init__(self, carts: CartRepositoryProtocol):
        self.carts = carts
        self.logger = logger.bind(service="CartService")

    def _current(self) -> Tuple[List[CartItem], Union[Err, None]]:
        loaded = self.carts.load()
        if loaded.ok:
            return list(loaded.value), None
        return list(loaded.fallback or []), loaded

    def _persist(self, items: List[CartItem]) -> Result[List[CartItem]]:
        saved = self.carts.save(items)
        if not saved.ok:
            self.logger.warning(
                "Cart change kept in memory only",
                kind=saved.kind.value,
                size=len(items),
            )
        return saved

    def get_cart(self) -> Result[List[CartItem]]:
        return self.carts.load()

    def add_item(self, product: Union[CartItem, Dict[str, Any]]) -> Result[List[CartItem]]:
        items, _ = self._current()
        if isinstance(product, CartItem):
            candidate = replace(product, extra=dict(product.extra))
        else:
            command = CartAddCommand.from_raw(product)
            candidate = command.item if command else None
        if candidate is None:
            self.logger.warning("Rejected cart add without product id")
            return Err(ErrorKind.INVALID_ITEM, "Product id is required", fallback=items)
        for existing in items:
            if same_id(existing.id, candidate.id):
                existing.quantity += 1
                self.logger.debug(
                    "Incremented cart line", item_id=existing.id, quantity=existing.quantity
                )
                break
        else:
            candidate.quantity = 1
            items.append(candidate)
            self.logger.debug("Appended cart line", item_id=candidate.id)
        return self._persist(items)

    def remove_item(self, item_id) -> Result[List[CartItem]]:
        items, _ = self._current()
        remaining = [i for i in items if not same_id(i.id, item_id)]
        self.logger.debug(
            "Removing cart line", item_id=item_id, removed=len(items) - len(remaining)
        )
        return self._persist(remaining)

    def update_quantity(self, item_id, quantity) -> Result[List[CartItem]]:
        items, error = self._current()
        command = QuantityUpdateCommand(item_id=item_id, quantity=quantity)
        if not command.is_valid():
            self.logger.warning(
                "Rejected cart quantity update", item_id=item_id, quantity=quantity
            )
            return Err(
                ErrorKind.INVALID_QUANTITY,
                "Quantity must be a whole number of at least 1",
                fallback=items,
            )
        target = next((i for i in items if same_id(i.id, item_id)), None)
        if target is None:
            self.logger.debug("Quantity update for absent cart line ignored", item_id=item_id)
            return error if error is not None else Ok(items)
        target.quantity = command.quantity
        return self._persist(items)

    def get_total(self) -> Result[Decimal]:
        items, error = self._current()
        total = cart_total(items)
        return error.with_fallback(total) if error is not None else Ok(total)

    def get_count(self) -> Result[int]:
        items, error = self._current()
        count = cart_count(items)
        return error.with_fallback(count) if error is not None else Ok(count)

    def clear_cart(self) -> Result[List[CartItem]]:
        self.logger.info("Clearing cart")
        return self._persist([])
