from __future__ import annotations

from django.core.cache import cache

from apps.gateway.container import build_backend_client, credentials_for_request
from apps.gateway.credentials import ADMIN

from .services import AdminAuthService, BookingAdminService, ProductAdminService, StaffAdminService


def _admin_client(request):
    return build_backend_client(credentials_for_request(request), audience=ADMIN)


def build_admin_auth_service(request) -> AdminAuthService:
    return AdminAuthService(
        client=build_backend_client(),
        credentials=credentials_for_request(request),
    )


def build_product_admin_service(request) -> ProductAdminService:
    return ProductAdminService(client=_admin_client(request), cache_backend=cache)


def build_booking_admin_service(request) -> BookingAdminService:
    return BookingAdminService(client=_admin_client(request))


def build_staff_admin_service(request) -> StaffAdminService:
    return StaffAdminService(client=_admin_client(request))
