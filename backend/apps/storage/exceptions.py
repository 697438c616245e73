class StorageError(Exception):
    """Raised when the visitor key-value storage cannot be read or written."""


class StorageQuotaExceededError(StorageError):
    """Raised when a write would exceed the storage quota."""
