import unittest
from unittest.mock import Mock, patch

from rest_framework.test import APIRequestFactory

from apps.catalog.dtos import CategoryDTO, ProductDTO
from apps.catalog.views import (
    CategoryProductsView,
    ProductDetailView,
    ProductListView,
    ProductSearchView,
)


def make_product(product_id="p1", name="Oak Chair", price=500.0):
    return ProductDTO(
        id=product_id,
        name=name,
        slug=name.lower().replace(" ", "-"),
        price=price,
        final_price=price,
        category="office",
    )


class CatalogViewsUnitTests(unittest.TestCase):
    def setUp(self):
        self.factory = APIRequestFactory()

    def test_product_list_paginates(self):
        service = Mock()
        service.list_products.return_value = [make_product(str(i), f"Chair {i}") for i in range(3)]
        with patch.object(ProductListView, "service", service):
            request = self.factory.get("/api/products/", {"limit": 2})
            response = ProductListView.as_view()(request)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["count"], 3)
        self.assertEqual(len(response.data["results"]), 2)
        self.assertEqual(response.data["results"][0]["slug"], "chair-0")

    def test_product_detail_found(self):
        service = Mock()
        service.get_product_by_slug.return_value = make_product()
        with patch.object(ProductDetailView, "service", service):
            request = self.factory.get("/api/products/oak-chair/")
            response = ProductDetailView.as_view()(request, slug="oak-chair")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["name"], "Oak Chair")
        self.assertEqual(response.data["returnPolicy"], "30 days")
        self.assertTrue(response.data["inStock"])

    def test_product_detail_not_found(self):
        service = Mock()
        service.get_product_by_slug.return_value = None
        with patch.object(ProductDetailView, "service", service):
            request = self.factory.get("/api/products/nope/")
            response = ProductDetailView.as_view()(request, slug="nope")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.data["error"]["code"], "NOT_FOUND")

    def test_search_passes_query(self):
        service = Mock()
        service.search.return_value = [make_product()]
        with patch.object(ProductSearchView, "service", service):
            request = self.factory.get("/api/search/", {"q": "oak"})
            response = ProductSearchView.as_view()(request)
        service.search.assert_called_once_with("oak")
        self.assertEqual(response.data["query"], "oak")
        self.assertEqual(response.data["count"], 1)

    def test_category_builds_filters(self):
        service = Mock()
        service.list_category.return_value = CategoryDTO(
            slug="office", title="Office Furniture", products=[make_product()]
        )
        with patch.object(CategoryProductsView, "service", service):
            request = self.factory.get("/api/categories/office/", {"max_price": "900"})
            response = CategoryProductsView.as_view()(request, slug="office")
        slug, filters = service.list_category.call_args[0]
        self.assertEqual(slug, "office")
        self.assertEqual(filters.max_price, 900.0)
        self.assertEqual(response.data["title"], "Office Furniture")
        self.assertEqual(response.data["count"], 1)
