from dataclasses import dataclass, field
from typing import Any, List

DEFAULT_MAX_PRICE = 100000
IN_STOCK = "instock"


def _split(values) -> List[str]:
    out = []
    for value in values or []:
        for part in str(value).split(","):
            part = part.strip()
            if part:
                out.append(part)
    return out


@dataclass
class CategoryFilterCommand:
    max_price: float = DEFAULT_MAX_PRICE
    materials: List[str] = field(default_factory=list)
    availability: List[str] = field(default_factory=lambda: [IN_STOCK])

    @staticmethod
    def from_query(params: Any) -> "CategoryFilterCommand":
        """Build filters from request query params (a QueryDict or plain dict)."""
        getlist = getattr(params, "getlist", None)

        def values(name):
            if getlist is not None:
                return getlist(name)
            raw = params.get(name)
            if raw is None:
                return []
            return raw if isinstance(raw, list) else [raw]

        max_price = DEFAULT_MAX_PRICE
        raw_price = params.get("max_price")
        if raw_price not in (None, ""):
            try:
                max_price = float(raw_price)
            except (TypeError, ValueError):
                max_price = DEFAULT_MAX_PRICE
        availability = [a.lower() for a in _split(values("availability"))]
        if "availability" not in params:
            availability = [IN_STOCK]
        return CategoryFilterCommand(
            max_price=max_price,
            materials=[m.lower() for m in _split(values("materials"))],
            availability=availability,
        )
