import unittest
from unittest.mock import Mock

from django.http import QueryDict

from apps.catalog.commands import CategoryFilterCommand
from apps.catalog.mappers import ProductMapper, slugify_name
from apps.catalog.repositories import BackendProductRepository, extract_rows


class ProductMapperTests(unittest.TestCase):
    def test_defaults_for_sparse_backend_product(self):
        dto = ProductMapper.from_backend({"_id": "x9", "name": "Dining  Set 6", "price": 900})
        self.assertEqual(dto.id, "x9")
        self.assertEqual(dto.slug, "dining-set-6")
        self.assertEqual(dto.final_price, 900)
        self.assertEqual(dto.discount, 0)
        self.assertEqual(dto.rating, 0)
        self.assertEqual(dto.return_policy, "30 days")
        self.assertIsNone(dto.stock)
        self.assertTrue(dto.in_stock)
        self.assertIsNone(dto.badge)

    def test_full_backend_product(self):
        dto = ProductMapper.from_backend(
            {
                "_id": "p1",
                "name": "Recliner",
                "slug": "recliner-lux",
                "price": "2000",
                "finalPrice": 1800,
                "discountPercentage": 10,
                "images": ["a.jpg", "b.jpg"],
                "stock": 0,
                "isVisible": False,
                "specifications": [{"key": "Seats", "value": "1"}, "junk"],
            }
        )
        self.assertEqual(dto.slug, "recliner-lux")
        self.assertEqual(dto.price, 2000.0)
        self.assertEqual(dto.final_price, 1800)
        self.assertEqual(dto.image, "a.jpg")
        self.assertEqual(dto.badge, "10% OFF")
        self.assertFalse(dto.in_stock)
        self.assertFalse(dto.is_visible)
        self.assertEqual(dto.specifications, [{"key": "Seats", "value": "1"}])

    def test_rows_without_id_are_skipped(self):
        rows = [{"name": "Ghost"}, "junk", {"_id": "ok", "name": "Real"}]
        self.assertEqual([p.id for p in ProductMapper.many_from_backend(rows)], ["ok"])

    def test_to_cart_product_uses_final_price(self):
        dto = ProductMapper.from_backend({"_id": "p1", "name": "Chair", "price": 500, "finalPrice": 450})
        payload = ProductMapper.to_cart_product(dto)
        self.assertEqual(payload["id"], "p1")
        self.assertEqual(payload["price"], 450)
        self.assertEqual(payload["productSlug"], "chair")

    def test_slugify_name(self):
        self.assertEqual(slugify_name("Office  Chair Pro"), "office-chair-pro")
        self.assertEqual(slugify_name(""), "")


class ExtractRowsTests(unittest.TestCase):
    def test_data_or_products_key(self):
        self.assertEqual(extract_rows({"data": [{"_id": 1}]}), [{"_id": 1}])
        self.assertEqual(extract_rows({"products": [{"_id": 2}]}), [{"_id": 2}])

    def test_single_object_is_wrapped(self):
        self.assertEqual(extract_rows({"data": {"_id": 3}}), [{"_id": 3}])

    def test_unexpected_payload(self):
        self.assertEqual(extract_rows("oops"), [])
        self.assertEqual(extract_rows({"success": True}), [])

    def test_repository_reads_products_endpoint(self):
        client = Mock()
        client.get.return_value = {"success": True, "data": [{"_id": "a"}]}
        rows = BackendProductRepository(client).fetch_all()
        client.get.assert_called_once_with("products")
        self.assertEqual(rows, [{"_id": "a"}])


class CategoryFilterCommandTests(unittest.TestCase):
    def test_defaults(self):
        cmd = CategoryFilterCommand.from_query({})
        self.assertEqual(cmd.max_price, 100000)
        self.assertEqual(cmd.materials, [])
        self.assertEqual(cmd.availability, ["instock"])

    def test_querydict_values(self):
        params = QueryDict("max_price=5000&materials=Oak,teak&materials=Velvet&availability=")
        cmd = CategoryFilterCommand.from_query(params)
        self.assertEqual(cmd.max_price, 5000.0)
        self.assertEqual(cmd.materials, ["oak", "teak", "velvet"])
        self.assertEqual(cmd.availability, [])

    def test_bad_price_falls_back(self):
        cmd = CategoryFilterCommand.from_query({"max_price": "cheap"})
        self.assertEqual(cmd.max_price, 100000)
