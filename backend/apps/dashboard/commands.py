from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, List

OPTIONAL_TEXT_FIELDS = ("weight", "dimensions", "material", "warranty")
OPTIONAL_LIST_FIELDS = ("colors", "finishes", "images")


def final_price(price: float, discount: float) -> float:
    """Price after a percentage discount, rounded half-up to paise."""
    amount = Decimal(str(price)) * (Decimal(100) - Decimal(str(discount or 0))) / Decimal(100)
    return float(amount.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


@dataclass
class ProductFormCommand:
    name: str
    short_description: str
    full_description: str
    price: float
    stock: int
    category: str
    brand: str
    sku: str
    discount: float = 0.0
    return_policy: str = ""
    is_visible: bool = True
    optional: Dict[str, Any] = field(default_factory=dict)
    specifications: List[Dict[str, str]] = field(default_factory=list)

    @staticmethod
    def from_validated(data: Dict[str, Any]) -> "ProductFormCommand":
        optional: Dict[str, Any] = {}
        for key in OPTIONAL_TEXT_FIELDS:
            value = (data.get(key) or "").strip()
            if value:
                optional[key] = value
        for key in OPTIONAL_LIST_FIELDS:
            values = [v for v in data.get(key) or [] if v]
            if values:
                optional[key] = values
        specs = [
            {"key": spec["key"], "value": spec["value"]}
            for spec in data.get("specifications") or []
            if spec.get("key") and spec.get("value")
        ]
        return ProductFormCommand(
            name=data["name"].strip(),
            short_description=data["shortDescription"].strip(),
            full_description=data["fullDescription"].strip(),
            price=float(data["price"]),
            stock=int(data["stock"]),
            category=(data.get("customCategory") or data.get("category") or "").strip(),
            brand=data["brand"].strip(),
            sku=data["sku"].strip(),
            discount=float(data.get("discountPercentage") or 0),
            return_policy=data.get("returnPolicy") or "",
            is_visible=data.get("isVisible", True),
            optional=optional,
            specifications=specs,
        )

    def to_backend(self) -> Dict[str, Any]:
        payload = {
            "name": self.name,
            "shortDescription": self.short_description,
            "fullDescription": self.full_description,
            "price": self.price,
            "discountPercentage": self.discount,
            "finalPrice": final_price(self.price, self.discount),
            "stock": self.stock,
            "category": self.category,
            "brand": self.brand,
            "sku": self.sku,
            "specifications": list(self.specifications),
            "isVisible": self.is_visible,
        }
        if self.return_policy:
            payload["returnPolicy"] = self.return_policy
        payload.update(self.optional)
        return payload
