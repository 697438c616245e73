from apps.common.result import Err, ErrorKind, Ok


def test_ok_unwraps_value():
    result = Ok([1, 2])
    assert result.ok
    assert result.unwrap_or_fallback() == [1, 2]


def test_err_carries_fallback():
    result = Err(ErrorKind.WRITE_FAILED, "quota exceeded", fallback=["chair"])
    assert not result.ok
    assert result.unwrap_or_fallback() == ["chair"]


def test_with_fallback_keeps_kind_and_message():
    original = Err(ErrorKind.STORAGE_UNAVAILABLE, "down", fallback=[])
    derived = original.with_fallback(0)
    assert (derived.kind, derived.message, derived.fallback) == (ErrorKind.STORAGE_UNAVAILABLE, "down", 0)
    assert original.fallback == []


def test_degraded_storage_kinds():
    degraded = {kind for kind in ErrorKind if kind.is_degraded_storage}
    assert degraded == {ErrorKind.STORAGE_UNAVAILABLE, ErrorKind.CORRUPT_DATA, ErrorKind.WRITE_FAILED}
