from typing import Any, Dict, List, Optional, Protocol


class ProductSourceProtocol(Protocol):
    def fetch_all(self) -> List[Dict[str, Any]]: ...


class CacheBackendProtocol(Protocol):
    def get(self, key: str, default: Optional[Any] = None) -> Any: ...

    def set(self, key: str, value: Any, timeout: Optional[int] = None) -> None: ...
