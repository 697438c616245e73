from __future__ import annotations

from apps.gateway.container import build_backend_client, credentials_for_request
from apps.gateway.credentials import DELIVERY

from .services import DeliveryAuthService, DeliveryWizardService, OrderTrackingService
from .wizard import SessionWizardStore


def build_delivery_auth_service(request) -> DeliveryAuthService:
    credentials = credentials_for_request(request)
    return DeliveryAuthService(
        client=build_backend_client(),
        credentials=credentials,
        wizard_store=SessionWizardStore(request.session),
    )


def build_delivery_wizard_service(request) -> DeliveryWizardService:
    credentials = credentials_for_request(request)
    return DeliveryWizardService(
        client=build_backend_client(credentials, audience=DELIVERY),
        store=SessionWizardStore(request.session),
    )


def build_order_tracking_service() -> OrderTrackingService:
    return OrderTrackingService(client=build_backend_client())
