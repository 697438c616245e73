from typing import Any, Dict, Iterable, List, Optional

from .dtos import WishlistItem

_KNOWN_KEYS = {"productSlug", "slug", "name", "productName", "price", "productImage", "id", "_id"}


def _slug_of(raw: Dict[str, Any]) -> Optional[str]:
    slug = raw.get("productSlug") or raw.get("slug")
    if not isinstance(slug, str) or not slug.strip():
        return None
    return slug


class WishlistItemMapper:
    @staticmethod
    def from_dict(raw: Dict[str, Any]) -> Optional[WishlistItem]:
        slug = _slug_of(raw)
        if slug is None:
            return None
        image = raw.get("productImage")
        if isinstance(image, list):
            image = image[0] if image else None
        product_id = raw.get("_id") or raw.get("id")
        return WishlistItem(
            product_slug=slug,
            name=str(raw.get("name") or raw.get("productName") or ""),
            price=raw.get("price"),
            image=image if isinstance(image, str) and image else None,
            product_id=str(product_id) if product_id not in (None, "") else None,
            extra={k: v for k, v in raw.items() if k not in _KNOWN_KEYS},
        )

    @staticmethod
    def to_dict(item: WishlistItem) -> Dict[str, Any]:
        payload: Dict[str, Any] = dict(item.extra)
        payload.update(
            {"productSlug": item.product_slug, "name": item.name, "price": item.price}
        )
        if item.image is not None:
            payload["productImage"] = item.image
        if item.product_id is not None:
            payload["id"] = item.product_id
        return payload

    @classmethod
    def many_to_dict(cls, items: Iterable[WishlistItem]) -> List[Dict[str, Any]]:
        return [cls.to_dict(i) for i in items]
