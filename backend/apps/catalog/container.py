from __future__ import annotations

from django.core.cache import cache

from apps.gateway.container import build_backend_client

from .repositories import BackendProductRepository
from .services import CatalogService


def build_catalog_service(*, disable_cache: bool = False) -> CatalogService:
    return CatalogService(
        products=BackendProductRepository(build_backend_client()),
        cache_backend=cache,
        disable_cache=disable_cache,
    )
