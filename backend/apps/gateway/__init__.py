from .client import BackendClient
from .exceptions import BackendError, BackendUnavailableError

__all__ = ["BackendClient", "BackendError", "BackendUnavailableError"]
