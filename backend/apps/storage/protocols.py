from __future__ import annotations

from typing import Optional, Protocol


class KeyValueStorageProtocol(Protocol):
    """Persistent string key/value storage scoped to one visitor."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def remove(self, key: str) -> None:
        ...
