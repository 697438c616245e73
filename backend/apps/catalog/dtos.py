from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ProductDTO:
    id: str
    name: str
    slug: str
    price: float
    final_price: float
    discount: float = 0
    image: str = ""
    images: List[str] = field(default_factory=list)
    description: str = ""
    short_description: str = ""
    full_description: str = ""
    category: str = ""
    rating: float = 0
    stock: Optional[int] = None
    is_visible: bool = True
    brand: str = ""
    sku: str = ""
    weight: str = ""
    dimensions: str = ""
    material: str = ""
    warranty: str = ""
    return_policy: str = "30 days"
    colors: List[Any] = field(default_factory=list)
    finishes: List[Any] = field(default_factory=list)
    specifications: List[Dict[str, Any]] = field(default_factory=list)
    reviews: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def in_stock(self) -> bool:
        return self.stock is None or self.stock > 0

    @property
    def badge(self) -> Optional[str]:
        if not self.discount:
            return None
        return f"{self.discount:g}% OFF"


@dataclass
class CategoryDTO:
    slug: str
    title: str
    products: List[ProductDTO] = field(default_factory=list)


"""DTO dataclasses only. Mapping logic lives in mappers.py."""
