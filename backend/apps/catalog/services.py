from __future__ import annotations

from typing import Any, Dict, List, Optional

from apps.common import get_logger

from .commands import IN_STOCK, CategoryFilterCommand
from .dtos import CategoryDTO, ProductDTO
from .mappers import ProductMapper
from .protocols import CacheBackendProtocol, ProductSourceProtocol

logger = get_logger(__name__).bind(component="catalog", layer="service")

CATEGORY_TITLES = {
    "sofas": "Sofas",
    "beds": "Beds",
    "dining-sets": "Dining Sets",
    "storage": "Storage",
    "office": "Office Furniture",
    "decor": "Decor & Furnishing",
}
DEFAULT_CATEGORY_TITLE = "Products"

CACHE_PREFIX = "catalog:products"
CACHE_VERSION_KEY = f"{CACHE_PREFIX}:version"


def bump_product_cache(cache_backend: CacheBackendProtocol) -> int:
    """Invalidate cached product listings after an admin change."""
    version = (cache_backend.get(CACHE_VERSION_KEY) or 1) + 1
    # Version key should not expire
    cache_backend.set(CACHE_VERSION_KEY, version, timeout=None)
    logger.debug("Bumped product cache version", new_version=version)
    return version


class CatalogService:
    def __init__(
        self,
        products: ProductSourceProtocol,
        cache_backend: Optional[CacheBackendProtocol] = None,
        disable_cache: bool = False,
    ):
        self.products = products
        self.cache = cache_backend
        self.disable_cache = disable_cache or cache_backend is None
        self.logger = logger.bind(service="CatalogService")

    def _cache_key(self) -> str:
        version = self.cache.get(CACHE_VERSION_KEY) or 1
        return f"{CACHE_PREFIX}:v{version}"

    def _rows(self) -> List[Dict[str, Any]]:
        if self.disable_cache:
            return self.products.fetch_all()
        # Read-through cache of the raw backend rows
        key = self._cache_key()
        cached = self.cache.get(key)
        if cached is not None:
            self.logger.debug("Product list cache hit", cache_key=key)
            return cached
        self.logger.debug("Product list cache miss", cache_key=key)
        rows = self.products.fetch_all()
        self.cache.set(key, rows)
        return rows

    def list_products(self) -> List[ProductDTO]:
        return ProductMapper.many_from_backend(self._rows())

    def get_product_by_slug(self, slug: str) -> Optional[ProductDTO]:
        for product in self.list_products():
            if product.slug == slug:
                return product
        self.logger.info("Product not found", slug=slug)
        return None

    def search(self, query: Optional[str]) -> List[ProductDTO]:
        products = self.list_products()
        needle = (query or "").strip().lower()
        if not needle:
            return products
        self.logger.debug("Searching products", query=needle)
        return [
            p
            for p in products
            if needle in p.name.lower()
            or needle in p.description.lower()
            or needle in p.category.lower()
        ]

    def list_category(
        self, slug: str, filters: Optional[CategoryFilterCommand] = None
    ) -> CategoryDTO:
        filters = filters or CategoryFilterCommand()
        matches = [p for p in self.list_products() if p.category == slug]
        filtered = [p for p in matches if self._passes(p, filters)]
        self.logger.debug(
            "Filtered category products",
            category=slug,
            total=len(matches),
            shown=len(filtered),
        )
        return CategoryDTO(
            slug=slug,
            title=CATEGORY_TITLES.get(slug, DEFAULT_CATEGORY_TITLE),
            products=filtered,
        )

    @staticmethod
    def _passes(product: ProductDTO, filters: CategoryFilterCommand) -> bool:
        if product.price > filters.max_price:
            return False
        if filters.materials:
            name = product.name.lower()
            if not any(material in name for material in filters.materials):
                return False
        if filters.availability:
            wants_in_stock = IN_STOCK in filters.availability
            if wants_in_stock != product.in_stock:
                return False
        return True
