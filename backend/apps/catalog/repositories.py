from typing import Any, Dict, List

from apps.common import get_logger
from apps.gateway.client import BackendClient

logger = get_logger(__name__).bind(component="catalog", layer="repository")


def extract_rows(payload: Any, *keys: str) -> List[Dict[str, Any]]:
    """Pull the product array out of a backend envelope.

    The backend answers with either ``data`` or ``products``; a single object
    is wrapped into a one-element list.
    """
    if not isinstance(payload, dict):
        return []
    for key in keys or ("data", "products"):
        value = payload.get(key)
        if not value:
            continue
        if isinstance(value, list):
            return [row for row in value if isinstance(row, dict)]
        if isinstance(value, dict):
            return [value]
    return []


class BackendProductRepository:
    """Public product listing served by the backend ``products`` endpoint."""

    def __init__(self, client: BackendClient):
        self.client = client

    def fetch_all(self) -> List[Dict[str, Any]]:
        rows = extract_rows(self.client.get("products"))
        logger.debug("Fetched products from backend", count=len(rows))
        return rows
