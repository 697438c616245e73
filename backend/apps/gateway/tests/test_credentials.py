import unittest

from rest_framework.exceptions import NotAuthenticated
from rest_framework.test import APIRequestFactory

from apps.gateway.credentials import (
    ADMIN,
    DELIVERY,
    SHOPPER,
    BackendCredentials,
    normalize_profile,
)
from apps.gateway.permissions import IsAdmin, IsDeliveryAgent, IsShopper


class BackendCredentialsTests(unittest.TestCase):
    def setUp(self):
        self.session = {}
        self.credentials = BackendCredentials(self.session)

    def test_audiences_are_independent(self):
        self.credentials.set_profile(SHOPPER, {"id": "u1"})
        self.credentials.store_cookies(SHOPPER, {"token": "s"})
        self.credentials.set_profile(ADMIN, {"id": "a1"})
        self.credentials.store_cookies(ADMIN, {"token": "a"})

        self.credentials.clear(SHOPPER)
        self.assertFalse(self.credentials.is_authenticated(SHOPPER))
        self.assertEqual(self.credentials.cookies_for(SHOPPER), {})
        self.assertTrue(self.credentials.is_authenticated(ADMIN))
        self.assertEqual(self.credentials.cookies_for(ADMIN), {"token": "a"})

    def test_cookies_merge(self):
        self.credentials.store_cookies(SHOPPER, {"a": "1"})
        self.credentials.store_cookies(SHOPPER, {"b": "2"})
        self.assertEqual(self.credentials.cookies_for(SHOPPER), {"a": "1", "b": "2"})

    def test_delivery_needs_token_and_profile(self):
        self.credentials.set_profile(DELIVERY, {"id": "d1"})
        self.assertFalse(self.credentials.is_authenticated(DELIVERY))
        self.credentials.set_delivery_token("jwt")
        self.assertTrue(self.credentials.is_authenticated(DELIVERY))
        self.credentials.clear(DELIVERY)
        self.assertIsNone(self.credentials.delivery_token)

    def test_profile_returns_copy(self):
        self.credentials.set_profile(SHOPPER, {"id": "u1"})
        self.credentials.profile(SHOPPER)["id"] = "tampered"
        self.assertEqual(self.credentials.profile(SHOPPER)["id"], "u1")

    def test_normalize_profile(self):
        self.assertEqual(normalize_profile({"_id": "x"}), {"_id": "x", "id": "x"})


class AudiencePermissionTests(unittest.TestCase):
    def setUp(self):
        self.request = APIRequestFactory().get("/api/")

    def test_missing_login_raises_not_authenticated(self):
        self.request.session = {}
        for permission in (IsShopper(), IsAdmin(), IsDeliveryAgent()):
            with self.assertRaises(NotAuthenticated):
                permission.has_permission(self.request, None)

    def test_logged_in_shopper_passes(self):
        self.request.session = {}
        BackendCredentials(self.request.session).set_profile(SHOPPER, {"id": "u1"})
        self.assertTrue(IsShopper().has_permission(self.request, None))
        with self.assertRaises(NotAuthenticated):
            IsAdmin().has_permission(self.request, None)
