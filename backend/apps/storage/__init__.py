from .backends import MemoryStorage, SessionStorage
from .exceptions import StorageError, StorageQuotaExceededError

__all__ = ["MemoryStorage", "SessionStorage", "StorageError", "StorageQuotaExceededError"]
