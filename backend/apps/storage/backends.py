from __future__ import annotations

from typing import Dict, MutableMapping, Optional

from apps.common import get_logger

from .exceptions import StorageError, StorageQuotaExceededError

logger = get_logger(__name__).bind(component="storage", layer="backend")


class SessionStorage:
    """Stores raw strings in the visitor's Django session.

    The session engine decides where bytes end up (Redis cache in production);
    any failure from it is re-raised as ``StorageError``.
    """

    def __init__(self, session: MutableMapping):
        self.session = session
        self.log = logger.bind(backend="session")

    def get(self, key: str) -> Optional[str]:
        try:
            value = self.session.get(key)
        except Exception as exc:
            self.log.warning("Session read failed", key=key, error=str(exc))
            raise StorageError(f"Unable to read {key}") from exc
        if value is None or isinstance(value, str):
            return value
        # Values written by older code paths may be native lists
        return None

    def set(self, key: str, value: str) -> None:
        try:
            self.session[key] = value
        except Exception as exc:
            self.log.warning("Session write failed", key=key, error=str(exc))
            raise StorageError(f"Unable to write {key}") from exc
        self._flush(key)

    def remove(self, key: str) -> None:
        try:
            self.session.pop(key, None)
        except Exception as exc:
            self.log.warning("Session remove failed", key=key, error=str(exc))
            raise StorageError(f"Unable to remove {key}") from exc
        self._flush(key)

    def _flush(self, key: str) -> None:
        """Write the session through to its engine and check the record landed.

        Plain mappings (request factories, tests) have nothing to flush. On
        failure the session is marked clean so ``SessionMiddleware`` does not
        retry the same write at the end of the request.
        """
        save = getattr(self.session, "save", None)
        if save is None:
            return
        try:
            save()
            landed = self.session.exists(self.session.session_key)
        except Exception as exc:
            self.session.modified = False
            self.log.warning("Session save failed", key=key, error=str(exc))
            raise StorageError(f"Unable to persist {key}") from exc
        if not landed:
            # The Redis cache ignores its own errors, so a lost write only shows up here
            self.session.modified = False
            self.log.warning("Session save was not persisted", key=key)
            raise StorageError(f"Unable to persist {key}")


class MemoryStorage:
    """Dict-backed storage with an optional byte quota across all keys."""

    def __init__(self, quota_bytes: Optional[int] = None, initial: Optional[Dict[str, str]] = None):
        self.quota_bytes = quota_bytes
        self._data: Dict[str, str] = dict(initial or {})

    def _size_with(self, key: str, value: str) -> int:
        total = 0
        for existing_key, existing_value in self._data.items():
            if existing_key == key:
                continue
            total += len(existing_key) + len(existing_value)
        return total + len(key) + len(value)

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        if self.quota_bytes is not None and self._size_with(key, value) > self.quota_bytes:
            raise StorageQuotaExceededError(
                f"Writing {key} exceeds quota of {self.quota_bytes} bytes"
            )
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self):
        return list(self._data.keys())
