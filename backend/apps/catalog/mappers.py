import math
import re
from typing import Any, Dict, Iterable, List, Optional

from .dtos import ProductDTO

_WHITESPACE = re.compile(r"\s+")


def slugify_name(name: str) -> str:
    """Slug the storefront derives for products the backend sent without one."""
    return _WHITESPACE.sub("-", (name or "").lower())


def to_number(value: Any, default: float = 0) -> float:
    if isinstance(value, bool) or value is None:
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    return number if math.isfinite(number) else default


def _to_stock(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _list(value: Any) -> list:
    return list(value) if isinstance(value, list) else []


class ProductMapper:
    @staticmethod
    def from_backend(raw: Dict[str, Any]) -> Optional[ProductDTO]:
        if not isinstance(raw, dict):
            return None
        product_id = raw.get("_id") or raw.get("id")
        if product_id is None:
            return None
        name = _text(raw.get("name"))
        images = [i for i in _list(raw.get("images")) if isinstance(i, str) and i]
        image = _text(raw.get("image"))
        if not images and image:
            images = [image]
        price = to_number(raw.get("price"))
        description = _text(raw.get("description"))
        return ProductDTO(
            id=str(product_id),
            name=name,
            slug=_text(raw.get("slug")) or slugify_name(name),
            price=price,
            final_price=to_number(raw.get("finalPrice"), price) or price,
            discount=to_number(raw.get("discountPercentage")),
            image=image or (images[0] if images else ""),
            images=images,
            description=description,
            short_description=_text(raw.get("shortDescription")),
            full_description=_text(raw.get("fullDescription")) or description,
            category=_text(raw.get("category")),
            rating=to_number(raw.get("rating")),
            stock=_to_stock(raw.get("stock")),
            is_visible=raw.get("isVisible") is not False,
            brand=_text(raw.get("brand")),
            sku=_text(raw.get("sku")),
            weight=_text(raw.get("weight")),
            dimensions=_text(raw.get("dimensions")),
            material=_text(raw.get("material")),
            warranty=_text(raw.get("warranty")),
            return_policy=_text(raw.get("returnPolicy")) or "30 days",
            colors=_list(raw.get("colors")),
            finishes=_list(raw.get("finishes")),
            specifications=[s for s in _list(raw.get("specifications")) if isinstance(s, dict)],
            reviews=[r for r in _list(raw.get("reviews")) if isinstance(r, dict)],
        )

    @staticmethod
    def many_from_backend(rows: Iterable[Any]) -> List[ProductDTO]:
        out = []
        for row in rows:
            dto = ProductMapper.from_backend(row)
            if dto is not None:
                out.append(dto)
        return out

    @staticmethod
    def to_cart_product(dto: ProductDTO) -> Dict[str, Any]:
        """Payload accepted by the cart and wishlist stores."""
        return {
            "id": dto.id,
            "_id": dto.id,
            "name": dto.name,
            "price": dto.final_price,
            "productImage": dto.image or None,
            "rating": dto.rating,
            "discount": dto.discount,
            "productSlug": dto.slug,
        }
