from __future__ import annotations

from typing import Any, Dict, Optional

from apps.api.exceptions import ApplicationError
from apps.common import get_logger
from apps.gateway.client import BackendClient
from apps.gateway.credentials import DELIVERY, BackendCredentials, normalize_profile

from .wizard import (
    DELIVERY_OTP_DIGITS,
    LOGIN_OTP_DIGITS,
    DeliveryWizard,
    SessionWizardStore,
    WizardState,
    WizardStep,
    WizardTransitionError,
    is_valid_otp,
)

logger = get_logger(__name__).bind(component="delivery", layer="service")


def _booking_from(payload: Any) -> Optional[Dict[str, Any]]:
    booking = payload.get("booking") if isinstance(payload, dict) else None
    return booking if isinstance(booking, dict) else None


def _message(payload: Any, default: str) -> str:
    if isinstance(payload, dict) and isinstance(payload.get("message"), str):
        return payload["message"] or default
    return default


class DeliveryAuthService:
    """Delivery agent login: email OTP exchanged for a backend bearer token."""

    def __init__(
        self,
        client: BackendClient,
        credentials: BackendCredentials,
        wizard_store: Optional[SessionWizardStore] = None,
    ):
        self.client = client
        self.credentials = credentials
        self.wizard_store = wizard_store
        self.logger = logger.bind(service="DeliveryAuthService")

    def request_otp(self, email: str) -> Dict[str, str]:
        payload = self.client.post("auth/delivery-boy/request-otp", {"email": email})
        self.logger.info("Delivery login OTP requested", email=email)
        return {"detail": _message(payload, "OTP sent to your email")}

    def _establish(self, endpoint: str, email: str, otp: str) -> Dict[str, Any]:
        if not is_valid_otp(otp, LOGIN_OTP_DIGITS):
            raise ApplicationError(
                "VALIDATION_ERROR",
                f"Please enter a valid {LOGIN_OTP_DIGITS}-digit OTP",
                details={"otp": "INVALID_FORMAT"},
            )
        payload = self.client.post(endpoint, {"email": email, "otp": otp})
        token = payload.get("token") if isinstance(payload, dict) else None
        user = payload.get("user") if isinstance(payload, dict) else None
        if not token or not isinstance(user, dict):
            raise ApplicationError("UNAUTHORIZED", _message(payload, "Login failed"))
        self.credentials.set_delivery_token(token)
        profile = normalize_profile(user)
        self.credentials.set_profile(DELIVERY, profile)
        self.logger.info("Delivery agent session established", email=email)
        return profile

    def verify_otp(self, email: str, otp: str) -> Dict[str, Any]:
        return self._establish("auth/delivery-boy/verify-otp", email, otp)

    def verify_email(self, email: str, otp: str) -> Dict[str, Any]:
        return self._establish("auth/verify-delivery-boy-email", email, otp)

    def profile(self) -> Optional[Dict[str, Any]]:
        return self.credentials.profile(DELIVERY)

    def logout(self) -> None:
        self.credentials.clear(DELIVERY)
        if self.wizard_store is not None:
            self.wizard_store.clear()
        self.logger.info("Delivery agent logged out")


class DeliveryWizardService:
    """Runs the search, verify and confirm steps against the backend."""

    def __init__(self, client: BackendClient, store: SessionWizardStore):
        self.client = client
        self.store = store
        self.logger = logger.bind(service="DeliveryWizardService")

    def _load(self, step: WizardStep, action: str) -> DeliveryWizard:
        wizard = self.store.load()
        try:
            wizard.require(step, action)
        except WizardTransitionError as exc:
            raise ApplicationError(
                "CONFLICT",
                exc.message,
                details={"step": exc.step.value},
                hint="Go back or reset the delivery wizard.",
            ) from exc
        return wizard

    def current(self) -> WizardState:
        return self.store.load().state

    def search(self, search_term: str) -> WizardState:
        term = (search_term or "").strip()
        if not term:
            raise ApplicationError("VALIDATION_ERROR", "Please enter booking ID", details={"searchTerm": None})
        wizard = self._load(WizardStep.SEARCH, "search")
        payload = self.client.get("delivery/search", params={"searchTerm": term})
        booking = _booking_from(payload)
        if booking is None or not booking.get("_id"):
            raise ApplicationError("NOT_FOUND", _message(payload, "Booking not found"), details={"searchTerm": term})
        state = wizard.booking_found(term, booking)
        self.store.save(wizard)
        self.logger.info("Booking found for delivery", booking=booking.get("bookingId"))
        return state

    def send_customer_otp(self) -> WizardState:
        wizard = self._load(WizardStep.VERIFY, "send the customer OTP")
        ref = wizard.state.booking_ref
        self.client.post(f"delivery/{ref}/generate-otp")
        state = wizard.otp_sent()
        self.store.save(wizard)
        self.logger.info("Customer OTP generated", booking_ref=ref)
        return state

    def confirm(self, otp: str, agent_name: str, agent_phone: str) -> Dict[str, Any]:
        wizard = self._load(WizardStep.CONFIRM, "confirm delivery")
        if not otp or not agent_name or not agent_phone:
            raise ApplicationError("VALIDATION_ERROR", "Please fill all required fields")
        if not is_valid_otp(otp, DELIVERY_OTP_DIGITS):
            raise ApplicationError(
                "VALIDATION_ERROR",
                f"OTP must be {DELIVERY_OTP_DIGITS} digits",
                details={"otp": "INVALID_FORMAT"},
            )
        ref = wizard.confirm_ready(otp, agent_name, agent_phone).booking_ref
        payload = self.client.post(
            f"delivery/{ref}/confirm",
            {"otp": otp, "deliveryBoyName": agent_name, "deliveryBoyPhone": agent_phone},
        )
        wizard.reset()
        self.store.save(wizard)
        self.logger.info("Delivery confirmed", booking_ref=ref)
        return {
            "detail": _message(payload, "Delivery confirmed successfully"),
            "booking": _booking_from(payload),
        }

    def back(self) -> WizardState:
        wizard = self.store.load()
        state = wizard.back()
        self.store.save(wizard)
        return state

    def reset(self) -> WizardState:
        wizard = self.store.load()
        state = wizard.reset()
        self.store.save(wizard)
        return state


class OrderTrackingService:
    def __init__(self, client: BackendClient):
        self.client = client

    def track(self, search_term: str) -> Dict[str, Any]:
        term = (search_term or "").strip()
        if not term:
            raise ApplicationError("VALIDATION_ERROR", "Please enter booking ID", details={"searchTerm": None})
        payload = self.client.get("delivery/search", params={"searchTerm": term})
        booking = _booking_from(payload)
        if booking is None:
            raise ApplicationError("NOT_FOUND", _message(payload, "Booking not found"))
        return booking
