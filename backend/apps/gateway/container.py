from __future__ import annotations

from typing import Optional

from django.conf import settings

from .client import DEFAULT_TIMEOUT, BackendClient
from .credentials import DELIVERY, SHOPPER, BackendCredentials


def build_backend_client(
    credentials: Optional[BackendCredentials] = None,
    audience: str = SHOPPER,
) -> BackendClient:
    base_url = getattr(settings, "BACKEND_API_URL", "http://localhost:8000/api")
    timeout = getattr(settings, "BACKEND_TIMEOUT", DEFAULT_TIMEOUT)
    if credentials is None:
        return BackendClient(base_url, timeout=timeout)
    token = credentials.delivery_token if audience == DELIVERY else None
    return BackendClient(
        base_url,
        token=token,
        cookies=credentials.cookies_for(audience),
        timeout=timeout,
    )


def credentials_for_request(request) -> BackendCredentials:
    return BackendCredentials(request.session)
