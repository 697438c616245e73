import math
from typing import Any, Dict, Iterable, List, Optional

from .dtos import CartItem

_KNOWN_KEYS = {
    "id",
    "_id",
    "name",
    "price",
    "quantity",
    "productImage",
    "rating",
    "discount",
    "productSlug",
}


def _normalize_id(raw: Any):
    if isinstance(raw, bool) or raw is None:
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if raw.is_integer() else None
    if isinstance(raw, str):
        return raw if raw.strip() else None
    return None


def _coerce_quantity(raw: Any) -> int:
    try:
        quantity = int(raw)
    except (TypeError, ValueError):
        return 1
    return quantity if quantity >= 1 else 1


def _optional_number(raw: Any) -> Optional[float]:
    if raw is None or isinstance(raw, bool):
        return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    return value if math.isfinite(value) else None


def _first_image(raw: Any) -> Optional[str]:
    if isinstance(raw, list):
        return raw[0] if raw and isinstance(raw[0], str) else None
    return raw if isinstance(raw, str) and raw else None


class CartItemMapper:
    @staticmethod
    def from_dict(raw: Dict[str, Any]) -> Optional[CartItem]:
        """Decode a stored (camelCase) entry; entries without a usable id are rejected."""
        item_id = _normalize_id(raw.get("id"))
        if item_id is None:
            item_id = _normalize_id(raw.get("_id"))
        if item_id is None:
            return None
        backend_id = raw.get("_id")
        return CartItem(
            id=item_id,
            name=str(raw.get("name") or ""),
            price=raw.get("price"),
            quantity=_coerce_quantity(raw.get("quantity", 1)),
            product_image=_first_image(raw.get("productImage")),
            rating=_optional_number(raw.get("rating")),
            discount=_optional_number(raw.get("discount")),
            backend_id=str(backend_id) if backend_id else None,
            slug=raw.get("productSlug") or None,
            extra={k: v for k, v in raw.items() if k not in _KNOWN_KEYS},
        )

    @staticmethod
    def to_dict(item: CartItem) -> Dict[str, Any]:
        payload: Dict[str, Any] = dict(item.extra)
        payload.update(
            {
                "id": item.id,
                "name": item.name,
                "price": item.price,
                "quantity": item.quantity,
            }
        )
        if item.product_image is not None:
            payload["productImage"] = item.product_image
        if item.rating is not None:
            payload["rating"] = item.rating
        if item.discount is not None:
            payload["discount"] = item.discount
        if item.backend_id is not None:
            payload["_id"] = item.backend_id
        if item.slug is not None:
            payload["productSlug"] = item.slug
        return payload

    @classmethod
    def many_to_dict(cls, items: Iterable[CartItem]) -> List[Dict[str, Any]]:
        return [cls.to_dict(i) for i in items]
