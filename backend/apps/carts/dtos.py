from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

ItemId = Union[int, str]


@dataclass
class CartItem:
    id: ItemId
    name: str
    price: Any
    quantity: int = 1
    product_image: Optional[str] = None
    rating: Optional[float] = None
    discount: Optional[float] = None
    backend_id: Optional[str] = None
    slug: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)


@dataclass
class CartSummaryDTO:
    items: list
    count: int
    total: str
"""DTO dataclasses only. Mapping logic lives in mappers.py."""
