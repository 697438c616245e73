from __future__ import annotations

from apps.gateway.container import build_backend_client, credentials_for_request
from apps.gateway.credentials import SHOPPER

from .services import AccountService


def build_account_service(request) -> AccountService:
    credentials = credentials_for_request(request)
    return AccountService(
        client=build_backend_client(credentials, audience=SHOPPER),
        credentials=credentials,
    )
