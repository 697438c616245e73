import os
import sys

import pytest

# Ensure backend package is importable when running `pytest` from repo root
BASE_DIR = os.path.dirname(__file__)
BACKEND_DIR = os.path.join(BASE_DIR, 'backend')
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)


@pytest.fixture(autouse=True)
def _clear_cache():
    """Catalog listings and health probes share the locmem cache between tests."""
    from django.core.cache import cache

    cache.clear()
    yield
    cache.clear()
