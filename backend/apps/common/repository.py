import json
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from apps.common.logger import get_logger
from apps.common.result import Err, ErrorKind, Ok, Result
from apps.storage.exceptions import StorageError, StorageQuotaExceededError
from apps.storage.protocols import KeyValueStorageProtocol

T = TypeVar('T')

logger = get_logger(__name__).bind(component='common', layer='repository')


class JsonListRepository(Generic[T]):
    """Persists a list of items as one JSON array under a fixed storage key.

    Every ``load`` returns freshly decoded objects and every ``save`` replaces
    the whole array, so no caller ever holds a reference into stored state.
    """

    def __init__(
        self,
        storage: KeyValueStorageProtocol,
        key: str,
        decode: Callable[[Dict[str, Any]], Optional[T]],
        encode: Callable[[T], Dict[str, Any]],
    ):
        self.storage = storage
        self.key = key
        self._decode = decode
        self._encode = encode
        self.log = logger.bind(key=key)

    def load(self) -> Result[List[T]]:
        try:
            raw = self.storage.get(self.key)
        except StorageError as exc:
            self.log.warning('Storage read failed; using empty collection', error=str(exc))
            return Err(ErrorKind.STORAGE_UNAVAILABLE, str(exc), fallback=[])
        if raw is None or raw == '':
            return Ok([])
        try:
            payload = json.loads(raw)
        except (TypeError, ValueError) as exc:
            self.log.warning('Stored JSON is malformed; using empty collection', error=str(exc))
            return Err(ErrorKind.CORRUPT_DATA, 'Stored data is not valid JSON', fallback=[])
        if not isinstance(payload, list):
            self.log.warning('Stored JSON is not an array; using empty collection', type=type(payload).__name__)
            return Err(ErrorKind.CORRUPT_DATA, 'Stored data is not a list', fallback=[])
        items: List[T] = []
        for entry in payload:
            item = self._decode(entry) if isinstance(entry, dict) else None
            if item is None:
                self.log.warning('Dropping malformed stored entry', entry=entry)
                continue
            items.append(item)
        return Ok(items)

    def save(self, items: List[T]) -> Result[List[T]]:
        snapshot = list(items)
        try:
            encoded = json.dumps([self._encode(item) for item in snapshot])
            self.storage.set(self.key, encoded)
        except StorageQuotaExceededError as exc:
            self.log.warning('Storage quota exceeded; change not persisted', error=str(exc))
            return Err(ErrorKind.WRITE_FAILED, str(exc), fallback=snapshot)
        except StorageError as exc:
            self.log.warning('Storage write failed; change not persisted', error=str(exc))
            return Err(ErrorKind.WRITE_FAILED, str(exc), fallback=snapshot)
        self.log.debug('Collection persisted', size=len(snapshot))
        return Ok(snapshot)


class InMemoryListRepository(Generic[T]):
    """Process-local list storage for tests; stores encoded copies to avoid aliasing."""

    def __init__(
        self,
        decode: Callable[[Dict[str, Any]], Optional[T]],
        encode: Callable[[T], Dict[str, Any]],
        items: Optional[List[T]] = None,
    ):
        self._decode = decode
        self._encode = encode
        self._rows: List[Dict[str, Any]] = [encode(i) for i in (items or [])]

    def load(self) -> Result[List[T]]:
        decoded = [self._decode(json.loads(json.dumps(row))) for row in self._rows]
        return Ok([item for item in decoded if item is not None])

    def save(self, items: List[T]) -> Result[List[T]]:
        self._rows = [json.loads(json.dumps(self._encode(item))) for item in items]
        return Ok(list(items))
