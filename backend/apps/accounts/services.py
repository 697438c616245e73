from __future__ import annotations

from typing import Any, Dict, List, Optional

from apps.api.exceptions import ApplicationError
from apps.common import get_logger
from apps.gateway.client import BackendClient, require_success
from apps.gateway.credentials import SHOPPER, BackendCredentials, normalize_profile
from apps.gateway.exceptions import BackendError, BackendUnavailableError

logger = get_logger(__name__).bind(component="accounts", layer="service")

PROFILE_FIELDS = ("name", "phone", "address")


class AccountService:
    """Shopper authentication against the backend.

    The backend sets its auth cookie on login; the cookie and the returned
    user profile are kept in the visitor session so later backend calls run
    as that shopper.
    """

    def __init__(self, client: BackendClient, credentials: BackendCredentials):
        self.client = client
        self.credentials = credentials
        self.logger = logger.bind(service="AccountService")

    def _remember(self, payload: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        user = payload.get("user")
        if not isinstance(user, dict):
            return None
        profile = normalize_profile(user)
        self.credentials.set_profile(SHOPPER, profile)
        self.credentials.store_cookies(SHOPPER, self.client.cookies)
        self.logger.info("Shopper session established", user_id=profile.get("id"))
        return profile

    def register(self, data: Dict[str, Any]) -> Dict[str, Any]:
        self.logger.debug("Registering shopper", email=data.get("email"))
        payload = require_success(self.client.post("auth/register", data), "Registration failed")
        return {"message": payload.get("message") or "", "user": self._remember(payload)}

    def login(self, email: str, password: str) -> Dict[str, Any]:
        self.logger.debug("Logging in shopper", email=email)
        payload = require_success(
            self.client.post("auth/login", {"email": email, "password": password}),
            "Login failed",
        )
        user = self._remember(payload)
        if user is None:
            raise ApplicationError("UNAUTHORIZED", payload.get("message") or "Login failed")
        return {"message": payload.get("message") or "", "user": user}

    def google_login(self, credential: str) -> Dict[str, Any]:
        payload = require_success(
            self.client.post("auth/google", {"token": credential}), "Google login failed"
        )
        user = self._remember(payload)
        if user is None:
            raise ApplicationError("UNAUTHORIZED", "Google login failed")
        return {"message": payload.get("message") or "", "user": user}

    def logout(self) -> None:
        try:
            self.client.post("auth/logout", {})
        except (BackendError, BackendUnavailableError) as exc:
            # Local credentials are dropped either way
            self.logger.warning("Backend logout failed", error=str(exc))
        self.credentials.clear(SHOPPER)
        self.logger.info("Shopper logged out")

    def verify_email(self, token: str) -> Dict[str, Any]:
        payload = require_success(
            self.client.post("auth/verify-email", {"token": token}),
            "Email verification failed",
        )
        return {"detail": payload.get("message") or "Email verified"}

    def get_profile(self) -> Optional[Dict[str, Any]]:
        return self.credentials.profile(SHOPPER)

    def update_profile(self, changes: Dict[str, Any]) -> Dict[str, Any]:
        profile = self.credentials.profile(SHOPPER)
        if profile is None:
            raise ApplicationError("UNAUTHORIZED", "Please login to continue")
        for field in PROFILE_FIELDS:
            if field in changes:
                profile[field] = changes[field]
        self.credentials.set_profile(SHOPPER, profile)
        self.logger.info("Profile updated", user_id=profile.get("id"))
        return profile

    def list_orders(self, status: Optional[str] = None) -> List[Dict[str, Any]]:
        try:
            payload = self.client.get("bookings")
        except BackendError as exc:
            if exc.status_code == 401:
                self.logger.info("Backend session expired; clearing shopper login")
                self.credentials.clear(SHOPPER)
            raise
        bookings = payload.get("bookings") if isinstance(payload, dict) else None
        bookings = [b for b in bookings or [] if isinstance(b, dict)]
        if status and status != "all":
            bookings = [b for b in bookings if b.get("status") == status]
        return bookings
