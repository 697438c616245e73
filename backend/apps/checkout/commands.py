from dataclasses import dataclass
from typing import Any, Dict, Optional


def _clean(value: Any) -> str:
    return str(value).strip() if value is not None else ""


@dataclass
class CheckoutDetailsCommand:
    address: str
    phone: str = ""
    first_name: str = ""
    last_name: str = ""

    @staticmethod
    def from_raw(payload: Optional[Dict[str, Any]]) -> "CheckoutDetailsCommand":
        data = dict(payload or {})
        return CheckoutDetailsCommand(
            address=_clean(data.get("address")),
            phone=_clean(data.get("phone")),
            first_name=_clean(data.get("firstName")),
            last_name=_clean(data.get("lastName")),
        )


@dataclass
class PaymentVerificationCommand:
    order_id: str
    payment_id: str
    signature: str

    def to_backend(self) -> Dict[str, str]:
        return {
            "razorpay_order_id": self.order_id,
            "razorpay_payment_id": self.payment_id,
            "razorpay_signature": self.signature,
        }


def split_name(full_name: Optional[str]):
    """First word is the first name, the rest is the last name."""
    parts = (full_name or "").split(" ")
    return parts[0], " ".join(parts[1:])
