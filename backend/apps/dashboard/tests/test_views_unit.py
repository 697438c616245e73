import unittest
from unittest.mock import Mock, patch

from rest_framework.test import APIRequestFactory

from apps.dashboard.views import (
    AdminOtpLoginView,
    AdminProductListView,
    DashboardSummaryView,
    DeliveryStaffListView,
    DeliveryStaffStatusView,
)
from apps.gateway.credentials import ADMIN, PROFILE_KEYS, SHOPPER


def admin_session():
    return {PROFILE_KEYS[ADMIN]: {"id": "a1", "name": "Admin"}}


class DashboardViewsUnitTests(unittest.TestCase):
    def setUp(self):
        self.factory = APIRequestFactory()

    def call(self, view, view_cls, request, service, session=None, **kwargs):
        request.session = session if session is not None else admin_session()
        with patch.object(view_cls, "service_factory", Mock(return_value=service)):
            return view(request, **kwargs)

    def test_shopper_cannot_open_console(self):
        request = self.factory.get("/api/admin/summary/")
        session = {PROFILE_KEYS[SHOPPER]: {"id": "u1"}}
        response = self.call(DashboardSummaryView.as_view(), DashboardSummaryView, request, Mock(), session)
        self.assertEqual(response.status_code, 401)

    def test_summary(self):
        service = Mock()
        service.summary.return_value = {"total": 3, "completed": 1, "pending": 2, "revenue": 1500.0}
        request = self.factory.get("/api/admin/summary/")
        response = self.call(DashboardSummaryView.as_view(), DashboardSummaryView, request, service)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["revenue"], 1500.0)

    def test_otp_login_open_to_anonymous(self):
        service = Mock()
        service.verify_otp.return_value = {"id": "a1", "name": "Admin", "email": "a@example.com"}
        request = self.factory.post(
            "/api/admin/auth/verify-otp/", {"email": "a@example.com", "otp": "123456"}, format="json"
        )
        response = self.call(AdminOtpLoginView.as_view(), AdminOtpLoginView, request, service, session={})
        self.assertEqual(response.status_code, 200)
        service.verify_otp.assert_called_once_with("a@example.com", "123456")

    def test_invalid_product_form_never_reaches_service(self):
        service = Mock()
        request = self.factory.post("/api/admin/products/", {"name": "Chair"}, format="json")
        response = self.call(AdminProductListView.as_view(), AdminProductListView, request, service)
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["error"]["code"], "VALIDATION_ERROR")
        service.create_product.assert_not_called()

    def test_staff_listing_envelope(self):
        service = Mock()
        service.list_delivery_staff.return_value = [{"_id": "d1"}]
        request = self.factory.get("/api/admin/delivery-staff/")
        response = self.call(DeliveryStaffListView.as_view(), DeliveryStaffListView, request, service)
        self.assertEqual(response.data, {"count": 1, "data": [{"_id": "d1"}]})

    def test_staff_register_requires_all_fields(self):
        service = Mock()
        request = self.factory.post(
            "/api/admin/delivery-staff/", {"name": "Ravi", "email": "ravi@example.com"}, format="json"
        )
        response = self.call(DeliveryStaffListView.as_view(), DeliveryStaffListView, request, service)
        self.assertEqual(response.status_code, 400)
        service.register_delivery_staff.assert_not_called()

    def test_deactivate_route(self):
        service = Mock()
        service.set_delivery_staff_active.return_value = {"detail": "Delivery boy deactivated successfully"}
        request = self.factory.patch("/api/admin/delivery-staff/d1/deactivate/")
        view = DeliveryStaffStatusView.as_view(active=False)
        response = self.call(view, DeliveryStaffStatusView, request, service, staff_id="d1")
        self.assertEqual(response.status_code, 200)
        service.set_delivery_staff_active.assert_called_once_with("d1", False)
