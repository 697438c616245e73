from dataclasses import dataclass
from typing import Any, Dict, Optional

from .dtos import CartItem
from .mappers import CartItemMapper


def _first_present(raw: Dict[str, Any], *keys: str):
    for key in keys:
        value = raw.get(key)
        if value not in (None, ""):
            return value
    return None


@dataclass
class CartAddCommand:
    item: CartItem

    @staticmethod
    def from_raw(raw: Dict[str, Any]) -> Optional["CartAddCommand"]:
        """Build a line item from a product payload as rendered on product cards.

        Accepts both the normalized keys (``name``, ``price``) and the legacy
        ``productName``/``productPrice`` aliases; quantity always starts at 1.
        """
        if not isinstance(raw, dict):
            return None
        images = _first_present(raw, "productImage", "images", "image")
        normalized = {
            **raw,
            "id": _first_present(raw, "id", "_id"),
            "name": _first_present(raw, "name", "productName") or "",
            "price": _first_present(raw, "price", "productPrice"),
            "productImage": images,
            "rating": _first_present(raw, "rating", "productReview"),
            "discount": _first_present(raw, "discount", "discountPercentage", "productDiscount"),
            "productSlug": _first_present(raw, "productSlug", "slug"),
            "quantity": 1,
        }
        for alias in ("productName", "productPrice", "images", "image", "productReview",
                      "discountPercentage", "productDiscount", "slug"):
            normalized.pop(alias, None)
        item = CartItemMapper.from_dict(normalized)
        if item is None:
            return None
        return CartAddCommand(item=item)


@dataclass
class QuantityUpdateCommand:
    item_id: Any
    quantity: Any

    def is_valid(self) -> bool:
        return (
            isinstance(self.quantity, int)
            and not isinstance(self.quantity, bool)
            and self.quantity >= 1
        )
