import unittest

from apps.catalog.commands import CategoryFilterCommand
from apps.catalog.services import CACHE_VERSION_KEY, CatalogService, bump_product_cache


class FakeCache:
    def __init__(self):
        self.store = {}

    def get(self, key, default=None):
        return self.store.get(key, default)

    def set(self, key, value, timeout=None):
        self.store[key] = value


class FakeProductSource:
    def __init__(self, rows):
        self.rows = rows
        self.calls = 0

    def fetch_all(self):
        self.calls += 1
        return list(self.rows)


ROWS = [
    {"_id": "a1", "name": "Oak Sofa", "price": 45000, "category": "sofas", "stock": 3,
     "description": "Three seater"},
    {"_id": "a2", "name": "Teak Sofa", "price": 120000, "category": "sofas", "stock": 1},
    {"_id": "a3", "name": "Velvet Sofa", "price": 30000, "category": "sofas", "stock": 0},
    {"_id": "b1", "name": "King Bed", "price": 60000, "category": "beds",
     "description": "Solid oak frame"},
    {"_id": "c1", "name": "Study Desk", "slug": "desk-pro", "price": "15000", "category": "office"},
]


class CatalogServiceTests(unittest.TestCase):
    def setUp(self):
        self.source = FakeProductSource(ROWS)
        self.service = CatalogService(products=self.source, disable_cache=True)

    def test_list_products_maps_rows(self):
        products = self.service.list_products()
        self.assertEqual([p.id for p in products], ["a1", "a2", "a3", "b1", "c1"])
        self.assertEqual(products[0].slug, "oak-sofa")

    def test_get_product_by_slug(self):
        self.assertEqual(self.service.get_product_by_slug("desk-pro").id, "c1")
        self.assertEqual(self.service.get_product_by_slug("king-bed").id, "b1")
        self.assertIsNone(self.service.get_product_by_slug("missing"))

    def test_search_matches_name_description_and_category(self):
        self.assertEqual([p.id for p in self.service.search("OAK")], ["a1", "b1"])
        self.assertEqual([p.id for p in self.service.search("office")], ["c1"])
        self.assertEqual(len(self.service.search("  ")), 5)

    def test_category_defaults_to_in_stock_under_max_price(self):
        page = self.service.list_category("sofas")
        self.assertEqual(page.title, "Sofas")
        self.assertEqual([p.id for p in page.products], ["a1"])

    def test_category_out_of_stock_only_without_instock(self):
        filters = CategoryFilterCommand(availability=["outofstock"])
        page = self.service.list_category("sofas", filters)
        self.assertEqual([p.id for p in page.products], ["a3"])

    def test_category_material_and_price_filters(self):
        filters = CategoryFilterCommand(max_price=200000, materials=["teak"], availability=[])
        page = self.service.list_category("sofas", filters)
        self.assertEqual([p.id for p in page.products], ["a2"])

    def test_unknown_category_title(self):
        page = self.service.list_category("garden")
        self.assertEqual(page.title, "Products")
        self.assertEqual(page.products, [])


class CatalogCacheTests(unittest.TestCase):
    def test_rows_are_cached_until_version_bump(self):
        source = FakeProductSource(ROWS)
        cache = FakeCache()
        service = CatalogService(products=source, cache_backend=cache)
        service.list_products()
        service.list_products()
        self.assertEqual(source.calls, 1)
        bump_product_cache(cache)
        self.assertEqual(cache.get(CACHE_VERSION_KEY), 2)
        service.list_products()
        self.assertEqual(source.calls, 2)

    def test_missing_cache_backend_disables_cache(self):
        source = FakeProductSource(ROWS)
        service = CatalogService(products=source)
        service.list_products()
        service.list_products()
        self.assertEqual(source.calls, 2)
