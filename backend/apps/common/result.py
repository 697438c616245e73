"""Explicit success/failure values for operations that must never raise to the caller.

``Err`` carries a ``fallback``: the best-effort value the caller may still use
(for example the in-memory cart after a failed write), so callers can tell
"empty because nothing was added" apart from "empty because storage failed".
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, Enum):
    STORAGE_UNAVAILABLE = "STORAGE_UNAVAILABLE"
    CORRUPT_DATA = "CORRUPT_DATA"
    WRITE_FAILED = "WRITE_FAILED"
    INVALID_QUANTITY = "INVALID_QUANTITY"
    INVALID_ITEM = "INVALID_ITEM"

    @property
    def is_degraded_storage(self) -> bool:
        return self in (
            ErrorKind.STORAGE_UNAVAILABLE,
            ErrorKind.CORRUPT_DATA,
            ErrorKind.WRITE_FAILED,
        )


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap_or_fallback(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[T]):
    kind: ErrorKind
    message: str
    fallback: Optional[T] = None

    @property
    def ok(self) -> bool:
        return False

    def unwrap_or_fallback(self) -> Optional[T]:
        return self.fallback

    def with_fallback(self, fallback: Any) -> "Err":
        return Err(kind=self.kind, message=self.message, fallback=fallback)


Result = Union[Ok[T], Err[T]]

__all__ = ["ErrorKind", "Ok", "Err", "Result"]
