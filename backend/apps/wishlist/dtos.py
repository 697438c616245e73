from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class WishlistItem:
    product_slug: str
    name: str = ""
    price: Any = None
    image: Optional[str] = None
    product_id: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)
