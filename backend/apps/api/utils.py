from collections.abc import Mapping
from typing import Any, Dict, Optional

from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.serializers import as_serializer_error

from apps.common.result import Err, ErrorKind

DEFAULT_ERROR_STATUS = status.HTTP_400_BAD_REQUEST

ERROR_STATUS_MAP = {
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "UNAUTHORIZED": status.HTTP_401_UNAUTHORIZED,
    "SERVER_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "METHOD_NOT_ALLOWED": status.HTTP_405_METHOD_NOT_ALLOWED,
    "CONFLICT": status.HTTP_409_CONFLICT,
    "UNPROCESSABLE_ENTITY": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "TOO_MANY_REQUESTS": status.HTTP_429_TOO_MANY_REQUESTS,
    "BAD_GATEWAY": status.HTTP_502_BAD_GATEWAY,
    "SERVICE_UNAVAILABLE": status.HTTP_503_SERVICE_UNAVAILABLE,
}

STATUS_CODE_NAMES = {value: key for key, value in ERROR_STATUS_MAP.items()}


def _normalize_details(details: Any) -> Any:
    if isinstance(details, ValidationError):
        return as_serializer_error(details)
    if isinstance(details, Mapping):
        return dict(details)
    if isinstance(details, Exception):
        return {"type": details.__class__.__name__}
    return details


def error_response(
    code: str,
    message: str,
    details: Optional[Any] = None,
    http_status: Optional[int] = None,
    *,
    hint: Optional[str] = None,
    extra: Optional[Mapping[str, Any]] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> Response:
    """Build the `{"error": {...}}` envelope every endpoint returns on failure.

    The HTTP status follows the code through ``ERROR_STATUS_MAP`` unless
    ``http_status`` overrides it; unknown codes fall back to 400.
    """
    code = code.strip().upper()
    if not code or not message.strip():
        raise ValueError("error_response requires a code and a message")
    status_code = int(http_status) if http_status is not None else ERROR_STATUS_MAP.get(code, DEFAULT_ERROR_STATUS)

    body: Dict[str, Any] = {"code": code, "message": message.strip(), "status": status_code}
    if details is not None:
        body["details"] = _normalize_details(details)
    if hint is not None:
        body["hint"] = hint
    if extra:
        body["extra"] = dict(extra)
    headers_dict = {str(k): str(v) for k, v in headers.items()} if headers else None
    return Response({"error": body}, status=status_code, headers=headers_dict)


def code_for_status(status_code: int) -> str:
    """Machine-readable code for an upstream HTTP status."""
    if status_code in STATUS_CODE_NAMES:
        return STATUS_CODE_NAMES[status_code]
    return "SERVER_ERROR" if status_code >= 500 else "UNKNOWN_ERROR"


def storage_warning(err: Optional[Err]) -> Optional[Dict[str, str]]:
    """Non-fatal warning payload for a degraded visitor storage result."""
    if err is None or err.ok or not err.kind.is_degraded_storage:
        return None
    return {"code": err.kind.value, "message": err.message}


def result_error_response(err: Err) -> Response:
    """Error envelope for a rejected store mutation."""
    if err.kind == ErrorKind.INVALID_QUANTITY:
        return error_response(
            "VALIDATION_ERROR",
            err.message,
            {"quantity": err.kind.value},
            hint="Send a whole number of at least 1, or remove the item instead.",
        )
    if err.kind == ErrorKind.INVALID_ITEM:
        return error_response("VALIDATION_ERROR", err.message, {"item": err.kind.value})
    return error_response(
        "SERVICE_UNAVAILABLE", err.message, {"storage": err.kind.value}
    )
