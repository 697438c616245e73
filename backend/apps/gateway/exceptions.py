from typing import Any, Optional


class BackendError(Exception):
    """The backend answered with a non-success HTTP status."""

    def __init__(self, message: str, status_code: int, payload: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload


class BackendUnavailableError(Exception):
    """The backend could not be reached (connection error or timeout)."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.url = url
