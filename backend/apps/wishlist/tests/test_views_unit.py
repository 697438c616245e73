import unittest
from unittest.mock import Mock, patch

from rest_framework.test import APIRequestFactory

from apps.carts.repositories import InMemoryCartRepository
from apps.carts.services import CartService
from apps.wishlist.repositories import InMemoryWishlistRepository
from apps.wishlist.services import WishlistService
from apps.wishlist.views import (
    WishlistAddToCartView,
    WishlistItemDetailView,
    WishlistItemListView,
    WishlistToggleView,
)

SOFA = {"_id": "p1", "productSlug": "oslo-sofa", "name": "Oslo Sofa", "price": 45000}


class WishlistViewsUnitTests(unittest.TestCase):
    def setUp(self):
        self.factory = APIRequestFactory()
        self.service = WishlistService(InMemoryWishlistRepository())

    def call(self, view_cls, request, **kwargs):
        request.session = {}
        with patch.object(view_cls, "service_factory", Mock(return_value=self.service)):
            return view_cls.as_view()(request, **kwargs)

    def test_toggle_reports_membership(self):
        request = self.factory.post("/api/wishlist/toggle/", SOFA, format="json")
        response = self.call(WishlistToggleView, request)
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.data["inWishlist"])
        self.assertEqual(response.data["count"], 1)

        request = self.factory.post("/api/wishlist/toggle/", SOFA, format="json")
        response = self.call(WishlistToggleView, request)
        self.assertFalse(response.data["inWishlist"])
        self.assertEqual(response.data["count"], 0)

    def test_add_requires_slug(self):
        request = self.factory.post("/api/wishlist/items/", {"name": "Sofa"}, format="json")
        response = self.call(WishlistItemListView, request)
        self.assertEqual(response.status_code, 400)

    def test_membership_check(self):
        self.service.add_item(SOFA)
        request = self.factory.get("/api/wishlist/items/oslo-sofa/")
        response = self.call(WishlistItemDetailView, request, product_slug="oslo-sofa")
        self.assertEqual(response.data, {"productSlug": "oslo-sofa", "inWishlist": True})

    def test_add_to_cart_keeps_wishlist_entry(self):
        self.service.add_item(SOFA)
        cart = CartService(InMemoryCartRepository())
        request = self.factory.post("/api/wishlist/items/oslo-sofa/add-to-cart/")
        with patch.object(WishlistAddToCartView, "cart_service_factory", Mock(return_value=cart)):
            response = self.call(WishlistAddToCartView, request, product_slug="oslo-sofa")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["count"], 1)
        self.assertEqual(response.data["total"], "45000.00")
        self.assertTrue(self.service.is_in_wishlist("oslo-sofa"))

    def test_add_to_cart_unknown_slug(self):
        request = self.factory.post("/api/wishlist/items/nope/add-to-cart/")
        response = self.call(WishlistAddToCartView, request, product_slug="nope")
        self.assertEqual(response.status_code, 404)
