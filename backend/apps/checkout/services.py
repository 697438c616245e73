from __future__ import annotations

from typing import Any, Dict, List, Tuple

from apps.api.exceptions import ApplicationError
from apps.carts.dtos import CartItem
from apps.carts.services import CartService, cart_count, cart_total, item_price
from apps.common import get_logger
from apps.gateway.client import BackendClient, require_success
from apps.gateway.credentials import SHOPPER, BackendCredentials

from .commands import CheckoutDetailsCommand, PaymentVerificationCommand, split_name

logger = get_logger(__name__).bind(component="checkout", layer="service")

CURRENCY = "INR"


def _product_id(item: CartItem):
    return item.backend_id or item.id


def cod_line(item: CartItem) -> Dict[str, Any]:
    return {
        "productId": _product_id(item),
        "name": item.name,
        "quantity": item.quantity,
        "price": float(item_price(item)),
    }


def payment_line(item: CartItem) -> Dict[str, Any]:
    return {
        "productId": _product_id(item),
        "quantity": item.quantity,
        "price": float(item_price(item)),
    }


class CheckoutService:
    """Turns the visitor's cart into exactly one backend order.

    Cash on delivery places the order in a single call. Online payment first
    creates a gateway order and completes once the gateway's signed callback
    has been verified by the backend. The cart is cleared only after the
    backend confirms the booking.
    """

    def __init__(
        self,
        carts: CartService,
        client: BackendClient,
        credentials: BackendCredentials,
        gateway_key_id: str = "",
    ):
        self.carts = carts
        self.client = client
        self.credentials = credentials
        self.gateway_key_id = gateway_key_id
        self.logger = logger.bind(service="CheckoutService")

    def _profile(self) -> Dict[str, Any]:
        profile = self.credentials.profile(SHOPPER)
        if profile is None:
            raise ApplicationError(
                "UNAUTHORIZED",
                "Please login to proceed with checkout",
                hint="Login and retry checkout.",
            )
        return profile

    def _items(self) -> List[CartItem]:
        return list(self.carts.get_cart().unwrap_or_fallback() or [])

    def summary(self) -> Dict[str, Any]:
        profile = self._profile()
        items = self._items()
        first_name, last_name = split_name(profile.get("name"))
        phone = profile.get("phone") or ""
        return {
            "items": items,
            "count": cart_count(items),
            "total": f"{cart_total(items):.2f}",
            "currency": CURRENCY,
            "gatewayKeyId": self.gateway_key_id,
            "phoneRequired": not phone,
            "prefill": {
                "firstName": first_name,
                "lastName": last_name,
                "email": profile.get("email") or "",
                "phone": phone,
                "address": profile.get("address") or "",
            },
        }

    def _prepare(
        self, details: CheckoutDetailsCommand
    ) -> Tuple[List[CartItem], str]:
        profile = self._profile()
        items = self._items()
        if not items:
            raise ApplicationError("VALIDATION_ERROR", "Your cart is empty", details={"cart": []})
        if not details.address:
            raise ApplicationError("VALIDATION_ERROR", "Address is required", details={"address": None})
        phone = details.phone or str(profile.get("phone") or "").strip()
        if not phone:
            raise ApplicationError("VALIDATION_ERROR", "Phone number is required", details={"phone": None})
        return items, phone

    def _complete(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        data = payload.get("data") if isinstance(payload.get("data"), dict) else {}
        booking_id = data.get("bookingId")
        cleared = self.carts.clear_cart()
        if not cleared.ok:
            self.logger.warning("Order placed but cart could not be cleared", booking_id=booking_id)
        self.logger.info("Order completed", booking_id=booking_id)
        return {"bookingId": booking_id, "cartCleared": cleared.ok}

    def place_cod_order(self, details: CheckoutDetailsCommand) -> Dict[str, Any]:
        items, phone = self._prepare(details)
        self.logger.info("Placing cash on delivery order", lines=len(items))
        payload = require_success(
            self.client.post(
                "payment/place-cod-order",
                {
                    "cartItems": [cod_line(i) for i in items],
                    "shippingAddress": details.address,
                    "phone": phone,
                    "firstName": details.first_name,
                    "lastName": details.last_name,
                },
            ),
            "Failed to place COD order",
        )
        return self._complete(payload)

    def create_payment_order(self, details: CheckoutDetailsCommand) -> Dict[str, Any]:
        items, phone = self._prepare(details)
        if not self.gateway_key_id:
            self.logger.error("Payment gateway key is not configured")
            raise ApplicationError(
                "SERVICE_UNAVAILABLE",
                "Payment gateway configuration missing",
                hint="Set PAYMENT_GATEWAY_KEY_ID.",
            )
        total = cart_total(items)
        self.logger.info("Creating payment order", lines=len(items), amount=str(total))
        payload = require_success(
            self.client.post(
                "payment/create-order",
                {
                    "amount": float(total),
                    "cartItems": [payment_line(i) for i in items],
                    "shippingAddress": details.address,
                    "phone": phone,
                },
            ),
            "Failed to create order",
        )
        data = payload.get("data") if isinstance(payload.get("data"), dict) else {}
        return {
            "orderId": data.get("orderId"),
            "amount": f"{total:.2f}",
            # Gateway widgets take the amount in the smallest currency unit
            "amountSubunits": int(total * 100),
            "currency": CURRENCY,
            "keyId": self.gateway_key_id,
            "order": data,
        }

    def verify_payment(self, command: PaymentVerificationCommand) -> Dict[str, Any]:
        self._profile()
        self.logger.info("Verifying gateway payment", order_id=command.order_id)
        payload = require_success(
            self.client.post("payment/verify-payment", command.to_backend()),
            "Payment verification failed",
        )
        return self._complete(payload)

