from __future__ import annotations

from django.conf import settings

from apps.carts.container import build_cart_service_for_request
from apps.gateway.container import build_backend_client, credentials_for_request
from apps.gateway.credentials import SHOPPER

from .services import CheckoutService


def build_checkout_service(request) -> CheckoutService:
    credentials = credentials_for_request(request)
    return CheckoutService(
        carts=build_cart_service_for_request(request),
        client=build_backend_client(credentials, audience=SHOPPER),
        credentials=credentials,
        gateway_key_id=getattr(settings, "PAYMENT_GATEWAY_KEY_ID", ""),
    )
