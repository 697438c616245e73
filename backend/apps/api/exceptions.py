from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Tuple

from django.core.exceptions import (
    PermissionDenied as DjangoPermissionDenied,
    ValidationError as DjangoValidationError,
)
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import (
    AuthenticationFailed,
    MethodNotAllowed,
    NotAuthenticated,
    NotFound,
    ParseError,
    PermissionDenied,
    ValidationError,
)
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from apps.api.utils import code_for_status, error_response
from apps.common import get_logger
from apps.gateway.exceptions import BackendError, BackendUnavailableError

logger = get_logger(__name__).bind(component="api", layer="exception")

SERVER_ERROR_MESSAGE = "Something went wrong"

# (code, fallback message, keep the DRF payload as details)
DRF_EXCEPTION_CODES: Tuple[Tuple[tuple, str, str, bool], ...] = (
    ((ValidationError,), "VALIDATION_ERROR", "Validation failed", True),
    ((ParseError,), "VALIDATION_ERROR", "Malformed request body", True),
    ((NotAuthenticated, AuthenticationFailed), "UNAUTHORIZED", "Please login to continue", False),
    ((PermissionDenied, DjangoPermissionDenied), "FORBIDDEN", "You are not allowed to do that", False),
    ((NotFound, Http404), "NOT_FOUND", "Resource not found", False),
    ((MethodNotAllowed,), "METHOD_NOT_ALLOWED", "Method not allowed", False),
)


class ApplicationError(Exception):
    """
    Error raised by services and views with a machine readable code.

    Args:
        code: Machine readable error code, mapped to an HTTP status unless
            ``status_code`` is given.
        message: Text shown to the shopper, admin or delivery agent.
        details: Structured context such as the offending field.
        hint: How the caller can recover.
        extra: Additional machine readable fields.
        headers: Response headers to send with the error.
    """

    def __init__(
        self,
        code: str,
        message: str,
        *,
        status_code: Optional[int] = None,
        details: Optional[Any] = None,
        hint: Optional[str] = None,
        extra: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, Any]] = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details
        self.hint = hint
        self.extra = extra
        self.headers = headers

    def to_response(self) -> Response:
        return error_response(
            self.code,
            self.message,
            self.details,
            http_status=self.status_code,
            hint=self.hint,
            extra=self.extra,
            headers=self.headers,
        )


def global_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """Turns every error raised under a DRF view into the ``{"error": {...}}`` envelope."""
    log = _bind_logger(context)

    if isinstance(exc, ApplicationError):
        log.info("Handled application error", code=exc.code, status=exc.status_code)
        return exc.to_response()

    if isinstance(exc, BackendError):
        return _from_backend_error(exc, log)

    if isinstance(exc, BackendUnavailableError):
        log.warning("Backend unavailable", url=exc.url)
        return error_response(
            "SERVICE_UNAVAILABLE",
            "Service temporarily unavailable",
            hint="Try again in a moment.",
        )

    if isinstance(exc, DjangoValidationError):
        exc = ValidationError(getattr(exc, "message_dict", None) or list(exc.messages))

    response = drf_exception_handler(exc, context)
    if response is None:
        log.exception("Unhandled exception bubbled to global handler")
        return error_response(
            "SERVER_ERROR",
            SERVER_ERROR_MESSAGE,
            http_status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    return _from_drf_response(exc, response, log)


def _bind_logger(context: Dict[str, Any]):
    log = logger
    view = context.get("view")
    request = context.get("request")
    if view is not None:
        log = log.bind(view=type(view).__name__)
    if request is not None:
        log = log.bind(
            method=getattr(request, "method", None),
            path=getattr(request, "path", None),
        )
    return log


def _from_drf_response(exc: Exception, response: Response, log) -> Response:
    status_code = response.status_code
    payload = response.data
    code, message, details = _classify(exc, payload, status_code)
    if status_code >= 500:
        log.error("Converted server error", code=code, status=status_code)
    else:
        log.info("Converted API exception", code=code, status=status_code)
    headers = dict(response.headers) if getattr(response, "headers", None) else None
    return error_response(code, message, details, http_status=status_code, headers=headers)


def _classify(exc: Exception, payload: Any, status_code: int) -> Tuple[str, str, Optional[Any]]:
    for classes, code, fallback, keep_details in DRF_EXCEPTION_CODES:
        if isinstance(exc, classes):
            message = fallback if keep_details else _detail_text(payload, fallback)
            return code, message, payload if keep_details else None
    if status_code >= 500:
        return "SERVER_ERROR", SERVER_ERROR_MESSAGE, None
    details = payload if isinstance(payload, (dict, list)) and payload else None
    return code_for_status(status_code), _detail_text(payload, "Request failed"), details


def _detail_text(payload: Any, fallback: str) -> str:
    if isinstance(payload, str):
        return payload
    if isinstance(payload, dict) and isinstance(payload.get("detail"), str):
        return payload["detail"]
    if isinstance(payload, list) and payload and isinstance(payload[0], str):
        return payload[0]
    return fallback


def _from_backend_error(exc: BackendError, log) -> Response:
    if not 400 <= exc.status_code < 500:
        # Upstream failures surface as a bad gateway without leaking backend details
        log.error("Backend server error", status=exc.status_code)
        return error_response(
            "BAD_GATEWAY",
            exc.message,
            http_status=status.HTTP_502_BAD_GATEWAY,
        )
    code = code_for_status(exc.status_code)
    log.info("Relayed backend error", code=code, status=exc.status_code)
    details = exc.payload if isinstance(exc.payload, dict) else None
    return error_response(code, exc.message, details, http_status=exc.status_code)


__all__ = ["ApplicationError", "global_exception_handler"]
