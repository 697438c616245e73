import logging
from typing import Any, Dict, Optional


class AppLogger:
    """Stdlib logger carrying bound ``key=value`` context.

    Messages render as ``"<message> | key=value ..."`` so storage degradation,
    backend failures and wizard transitions stay greppable in plain log output.
    """

    def __init__(self, name: str, context: Optional[Dict[str, Any]] = None, _logger: Optional[logging.Logger] = None):
        self._name = name
        self._logger = _logger or logging.getLogger(name)
        self._context = dict(context or {})

    @property
    def context(self) -> Dict[str, Any]:
        return dict(self._context)

    def bind(self, **extra: Any) -> "AppLogger":
        return AppLogger(self._name, {**self._context, **extra}, _logger=self._logger)

    def bind_request(self, request) -> "AppLogger":
        """Bind method, path and a shortened visitor session key when available."""
        if request is None:
            return self
        extra: Dict[str, Any] = {
            "method": getattr(request, "method", None),
            "path": getattr(request, "path", None),
        }
        session_key = getattr(getattr(request, "session", None), "session_key", None)
        if session_key:
            extra["visitor"] = session_key[:8]
        return self.bind(**extra)

    def debug(self, message: str, **context: Any) -> None:
        self._log(logging.DEBUG, message, context)

    def info(self, message: str, **context: Any) -> None:
        self._log(logging.INFO, message, context)

    def warning(self, message: str, **context: Any) -> None:
        self._log(logging.WARNING, message, context)

    def error(self, message: str, **context: Any) -> None:
        self._log(logging.ERROR, message, context)

    def exception(self, message: str, **context: Any) -> None:
        self._log(logging.ERROR, message, context, exc_info=True)

    def _log(self, level: int, message: str, context: Dict[str, Any], exc_info: bool = False) -> None:
        if not self._logger.isEnabledFor(level):
            return
        merged = {**self._context, **context}
        if merged:
            pairs = " ".join(f"{key}={_render(value)}" for key, value in merged.items())
            message = f"{message} | {pairs}"
        self._logger.log(level, message, exc_info=exc_info)


def _render(value: Any) -> str:
    if value is None or isinstance(value, (str, int, float, bool)):
        return str(value)
    return repr(value)


def get_logger(name: str) -> AppLogger:
    return AppLogger(name)
