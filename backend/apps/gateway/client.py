from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

import requests
from requests.utils import dict_from_cookiejar

from apps.common import get_logger

from .exceptions import BackendError, BackendUnavailableError

logger = get_logger(__name__).bind(component="gateway", layer="client")

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}
DEFAULT_TIMEOUT = 10.0


def require_success(payload: Any, default_message: str) -> Dict[str, Any]:
    """Backend envelopes carry ``success``; a 2xx answer with ``success: false`` is still a failure."""
    if not isinstance(payload, dict):
        raise BackendError(default_message, 502, payload)
    if payload.get("success") is False:
        message = payload.get("message")
        if not isinstance(message, str) or not message.strip():
            message = default_message
        raise BackendError(message, 400, payload)
    return payload


class BackendClient:
    """JSON client for the storefront backend.

    Cookies set by the backend (shopper/admin sessions) are kept on the
    underlying ``requests.Session`` so callers can persist them for the visitor.
    """

    def __init__(
        self,
        base_url: str,
        *,
        token: Optional[str] = None,
        cookies: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/") + "/"
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(DEFAULT_HEADERS)
        if token:
            self.session.headers["Authorization"] = f"Bearer {token}"
        if cookies:
            self.session.cookies.update(dict(cookies))
        self.log = logger.bind(base_url=self.base_url)

    @property
    def cookies(self) -> Dict[str, str]:
        return dict_from_cookiejar(self.session.cookies)

    def url_for(self, endpoint: str) -> str:
        return self.base_url + endpoint.lstrip("/")

    def request(
        self,
        method: str,
        endpoint: str,
        data: Optional[Any] = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        url = self.url_for(endpoint)
        self.log.debug("Backend request", method=method, url=url)
        try:
            response = self.session.request(
                method,
                url,
                json=data,
                params=params,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            self.log.warning("Backend unreachable", method=method, url=url, error=str(exc))
            raise BackendUnavailableError("Backend service is unreachable", url=url) from exc
        return self._handle_response(method, response)

    def _handle_response(self, method: str, response: requests.Response) -> Any:
        content_type = response.headers.get("Content-Type", "")
        if "application/json" in content_type:
            try:
                data = response.json()
            except ValueError:
                data = response.text
        else:
            data = response.text
        self.log.debug(
            "Backend response", method=method, url=response.url, status=response.status_code
        )
        if not response.ok:
            message = None
            if isinstance(data, dict):
                message = data.get("message")
            if not isinstance(message, str) or not message.strip():
                message = f"HTTP Error {response.status_code}"
            self.log.warning(
                "Backend returned error",
                method=method,
                url=response.url,
                status=response.status_code,
                message=message,
            )
            raise BackendError(message, response.status_code, data)
        return data

    def get(self, endpoint: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        return self.request("GET", endpoint, params=params)

    def post(self, endpoint: str, data: Optional[Any] = None) -> Any:
        return self.request("POST", endpoint, data=data)

    def put(self, endpoint: str, data: Optional[Any] = None) -> Any:
        return self.request("PUT", endpoint, data=data)

    def patch(self, endpoint: str, data: Optional[Any] = None) -> Any:
        return self.request("PATCH", endpoint, data=data)

    def delete(self, endpoint: str) -> Any:
        return self.request("DELETE", endpoint)
