import unittest
from unittest.mock import Mock

from apps.api.exceptions import ApplicationError
from apps.catalog.services import CACHE_VERSION_KEY
from apps.dashboard.commands import ProductFormCommand
from apps.dashboard.services import (
    AdminAuthService,
    BookingAdminService,
    ProductAdminService,
    StaffAdminService,
    summarize_bookings,
)
from apps.gateway.client import BackendClient
from apps.gateway.credentials import ADMIN, BackendCredentials
from apps.gateway.exceptions import BackendError


class DictCache:
    def __init__(self):
        self.store = {}

    def get(self, key, default=None):
        return self.store.get(key, default)

    def set(self, key, value, timeout=None):
        self.store[key] = value


def sample_command():
    return ProductFormCommand(
        name="Oslo Sofa",
        short_description="Three seater",
        full_description="Solid wood",
        price=1000,
        stock=2,
        category="Sofas",
        brand="D&L",
        sku="SOF-1",
        discount=10,
    )


class AdminAuthServiceTests(unittest.TestCase):
    def setUp(self):
        self.session = {}
        self.credentials = BackendCredentials(self.session)
        self.client = Mock(spec=BackendClient)
        self.client.cookies = {"token": "admin-cookie"}
        self.service = AdminAuthService(self.client, self.credentials)

    def test_verify_otp_marks_session_as_admin(self):
        self.client.post.return_value = {"success": True, "user": {"_id": "a1", "role": "admin"}}
        profile = self.service.verify_otp("admin@example.com", "654321")
        self.assertEqual(profile["id"], "a1")
        self.assertTrue(self.credentials.is_authenticated(ADMIN))
        self.assertEqual(self.credentials.cookies_for(ADMIN), {"token": "admin-cookie"})

    def test_invalid_otp_format_skips_backend(self):
        with self.assertRaises(ApplicationError):
            self.service.verify_otp("admin@example.com", "12")
        self.client.post.assert_not_called()

    def test_logout_clears_admin_only(self):
        self.credentials.set_profile(ADMIN, {"id": "a1"})
        self.credentials.set_profile("shopper", {"id": "u1"})
        self.service.logout()
        self.assertFalse(self.credentials.is_authenticated(ADMIN))
        self.assertTrue(self.credentials.is_authenticated("shopper"))


class ProductAdminServiceTests(unittest.TestCase):
    def setUp(self):
        self.client = Mock(spec=BackendClient)
        self.cache = DictCache()
        self.service = ProductAdminService(self.client, self.cache)

    def test_list_reads_products_key(self):
        self.client.get.return_value = {"success": True, "products": [{"_id": "p1"}]}
        self.assertEqual(self.service.list_products(), [{"_id": "p1"}])
        self.client.get.assert_called_once_with("products/admin/all")

    def test_get_missing_product(self):
        self.client.get.return_value = {"success": True}
        with self.assertRaises(ApplicationError) as ctx:
            self.service.get_product("p404")
        self.assertEqual(ctx.exception.code, "NOT_FOUND")

    def test_create_sends_final_price_and_bumps_cache(self):
        self.client.post.return_value = {"success": True, "product": {"_id": "p1"}}
        self.service.create_product(sample_command())
        endpoint, payload = self.client.post.call_args[0]
        self.assertEqual(endpoint, "products")
        self.assertEqual(payload["finalPrice"], 900.0)
        self.assertEqual(self.cache.get(CACHE_VERSION_KEY), 2)

    def test_failed_update_leaves_cache_alone(self):
        self.client.put.return_value = {"success": False, "message": "SKU already exists"}
        with self.assertRaises(BackendError) as ctx:
            self.service.update_product("p1", sample_command())
        self.assertEqual(ctx.exception.message, "SKU already exists")
        self.assertIsNone(self.cache.get(CACHE_VERSION_KEY))

    def test_delete_accepts_empty_body(self):
        self.client.delete.return_value = ""
        self.service.delete_product("p1")
        self.assertEqual(self.cache.get(CACHE_VERSION_KEY), 2)

    def test_visibility_patch(self):
        self.client.patch.return_value = {"success": True}
        self.service.set_visibility("p1", False)
        self.client.patch.assert_called_once_with("products/p1/visibility", {"isVisible": False})


class BookingAdminServiceTests(unittest.TestCase):
    def test_summary_counts_and_revenue(self):
        bookings = [
            {"status": "completed", "totalAmount": 1200.5},
            {"status": "pending", "totalAmount": 800},
            {"status": "pending"},
            {"status": "cancelled", "totalAmount": "bad"},
        ]
        self.assertEqual(
            summarize_bookings(bookings),
            {"total": 4, "completed": 1, "pending": 2, "revenue": 2000.5},
        )

    def test_summary_of_nothing(self):
        self.assertEqual(summarize_bookings([]), {"total": 0, "completed": 0, "pending": 0, "revenue": 0.0})

    def test_status_and_cancel_endpoints(self):
        client = Mock(spec=BackendClient)
        client.patch.return_value = {"success": True}
        service = BookingAdminService(client)
        service.update_status("b1", "shipped")
        service.cancel("b1")
        client.patch.assert_any_call("bookings/b1/status", {"status": "shipped"})
        client.patch.assert_any_call("bookings/b1/cancel")


class StaffAdminServiceTests(unittest.TestCase):
    def setUp(self):
        self.client = Mock(spec=BackendClient)
        self.service = StaffAdminService(self.client)

    def test_register_delivery_staff(self):
        self.client.post.return_value = {"success": True, "message": "Registered"}
        result = self.service.register_delivery_staff("Ravi", "ravi@example.com", "99000")
        self.assertEqual(result, {"detail": "Registered"})
        self.client.post.assert_called_once_with(
            "auth/register-delivery-boy",
            {"name": "Ravi", "email": "ravi@example.com", "phone": "99000"},
        )

    def test_deactivate_delivery_staff(self):
        self.client.patch.return_value = {"success": True}
        result = self.service.set_delivery_staff_active("d1", False)
        self.client.patch.assert_called_once_with("admin/delivery-boys/d1/deactivate")
        self.assertEqual(result["detail"], "Delivery boy deactivated successfully")
