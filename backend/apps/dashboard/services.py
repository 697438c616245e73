from __future__ import annotations

from typing import Any, Dict, List, Optional

from apps.api.exceptions import ApplicationError
from apps.catalog.protocols import CacheBackendProtocol
from apps.catalog.repositories import extract_rows
from apps.catalog.services import bump_product_cache
from apps.common import get_logger
from apps.delivery.wizard import LOGIN_OTP_DIGITS, is_valid_otp
from apps.gateway.client import BackendClient, require_success
from apps.gateway.credentials import ADMIN, BackendCredentials, normalize_profile

from .commands import ProductFormCommand

logger = get_logger(__name__).bind(component="dashboard", layer="service")

COMPLETED = "completed"
PENDING = "pending"


def summarize_bookings(bookings: List[Dict[str, Any]]) -> Dict[str, Any]:
    revenue = 0.0
    for booking in bookings:
        try:
            revenue += float(booking.get("totalAmount") or 0)
        except (TypeError, ValueError):
            continue
    return {
        "total": len(bookings),
        "completed": sum(1 for b in bookings if b.get("status") == COMPLETED),
        "pending": sum(1 for b in bookings if b.get("status") == PENDING),
        "revenue": round(revenue, 2),
    }


class AdminAuthService:
    """Admin login by emailed OTP; the backend answers with its auth cookie."""

    def __init__(self, client: BackendClient, credentials: BackendCredentials):
        self.client = client
        self.credentials = credentials
        self.logger = logger.bind(service="AdminAuthService")

    def request_otp(self, email: str) -> Dict[str, str]:
        payload = require_success(
            self.client.post("admin/auth/request-otp", {"email": email}), "Failed to request OTP"
        )
        self.logger.info("Admin OTP requested", email=email)
        return {"detail": payload.get("message") or "OTP sent to your email"}

    def verify_otp(self, email: str, otp: str) -> Dict[str, Any]:
        if not is_valid_otp(otp, LOGIN_OTP_DIGITS):
            raise ApplicationError(
                "VALIDATION_ERROR",
                f"Please enter a valid {LOGIN_OTP_DIGITS}-digit OTP",
                details={"otp": otp},
            )
        payload = require_success(
            self.client.post("admin/auth/verify-otp", {"email": email, "otp": otp}), "Invalid OTP"
        )
        user = payload.get("user")
        if not isinstance(user, dict):
            raise ApplicationError("UNAUTHORIZED", payload.get("message") or "Invalid OTP")
        profile = normalize_profile(user)
        self.credentials.set_profile(ADMIN, profile)
        self.credentials.store_cookies(ADMIN, self.client.cookies)
        self.logger.info("Admin session established", email=email)
        return profile

    def profile(self) -> Optional[Dict[str, Any]]:
        return self.credentials.profile(ADMIN)

    def logout(self) -> None:
        self.credentials.clear(ADMIN)
        self.logger.info("Admin logged out")


class ProductAdminService:
    def __init__(self, client: BackendClient, cache_backend: Optional[CacheBackendProtocol] = None):
        self.client = client
        self.cache_backend = cache_backend
        self.logger = logger.bind(service="ProductAdminService")

    def _changed(self) -> None:
        if self.cache_backend is not None:
            bump_product_cache(self.cache_backend)

    def list_products(self) -> List[Dict[str, Any]]:
        payload = require_success(self.client.get("products/admin/all"), "Failed to fetch products")
        return extract_rows(payload, "products", "data")

    def get_product(self, product_id: str) -> Dict[str, Any]:
        payload = require_success(self.client.get(f"products/{product_id}"), "Failed to fetch product")
        rows = extract_rows(payload, "product", "data")
        if not rows:
            raise ApplicationError("NOT_FOUND", "Product not found", details={"id": product_id})
        return rows[0]

    def create_product(self, command: ProductFormCommand) -> Dict[str, Any]:
        payload = require_success(
            self.client.post("products", command.to_backend()), "Failed to create product"
        )
        self._changed()
        self.logger.info("Product created", sku=command.sku)
        return payload

    def update_product(self, product_id: str, command: ProductFormCommand) -> Dict[str, Any]:
        payload = require_success(
            self.client.put(f"products/{product_id}", command.to_backend()), "Failed to update product"
        )
        self._changed()
        self.logger.info("Product updated", product_id=product_id)
        return payload

    def delete_product(self, product_id: str) -> None:
        payload = self.client.delete(f"products/{product_id}")
        # 204 answers carry no envelope
        if isinstance(payload, dict):
            require_success(payload, "Failed to delete product")
        self._changed()
        self.logger.info("Product deleted", product_id=product_id)

    def set_visibility(self, product_id: str, is_visible: bool) -> Dict[str, Any]:
        payload = require_success(
            self.client.patch(f"products/{product_id}/visibility", {"isVisible": is_visible}),
            "Failed to toggle product visibility",
        )
        self._changed()
        self.logger.info("Product visibility changed", product_id=product_id, visible=is_visible)
        return payload


class BookingAdminService:
    def __init__(self, client: BackendClient):
        self.client = client
        self.logger = logger.bind(service="BookingAdminService")

    def list_bookings(self) -> List[Dict[str, Any]]:
        payload = require_success(self.client.get("bookings/admin/all"), "Failed to fetch bookings")
        return extract_rows(payload, "data", "bookings")

    def summary(self) -> Dict[str, Any]:
        return summarize_bookings(self.list_bookings())

    def update_status(self, booking_id: str, status: str) -> Dict[str, Any]:
        payload = require_success(
            self.client.patch(f"bookings/{booking_id}/status", {"status": status}),
            "Failed to update booking status",
        )
        self.logger.info("Booking status updated", booking_id=booking_id, status=status)
        return payload

    def cancel(self, booking_id: str) -> Dict[str, Any]:
        payload = require_success(
            self.client.patch(f"bookings/{booking_id}/cancel"), "Failed to cancel booking"
        )
        self.logger.info("Booking cancelled", booking_id=booking_id)
        return payload


class StaffAdminService:
    """Customer directory and delivery staff management."""

    def __init__(self, client: BackendClient):
        self.client = client
        self.logger = logger.bind(service="StaffAdminService")

    def list_customers(self) -> List[Dict[str, Any]]:
        payload = require_success(self.client.get("users"), "Failed to fetch customers")
        return extract_rows(payload, "data", "users")

    def list_delivery_staff(self) -> List[Dict[str, Any]]:
        payload = require_success(self.client.get("admin/delivery-boys"), "Failed to load delivery boys")
        return extract_rows(payload, "data")

    def register_delivery_staff(self, name: str, email: str, phone: str) -> Dict[str, Any]:
        payload = require_success(
            self.client.post(
                "auth/register-delivery-boy", {"name": name, "email": email, "phone": phone}
            ),
            "Failed to add delivery boy",
        )
        self.logger.info("Delivery staff registered", email=email)
        return {"detail": payload.get("message") or "Delivery boy registered successfully"}

    def set_delivery_staff_active(self, staff_id: str, active: bool) -> Dict[str, Any]:
        action = "activate" if active else "deactivate"
        payload = require_success(
            self.client.patch(f"admin/delivery-boys/{staff_id}/{action}"),
            f"Failed to {action} delivery boy",
        )
        self.logger.info("Delivery staff status changed", staff_id=staff_id, active=active)
        return {"detail": payload.get("message") or f"Delivery boy {action}d successfully"}
