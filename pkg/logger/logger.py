import sys
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Iterator, Optional, Protocol, runtime_checkable

from loguru import logger as _loguru_logger  # type: ignore

from .constant import *
from .type import LoggerConfig

# Per-request ids, scoped to the running task
_trace_id_var: ContextVar[Optional[str]] = ContextVar(TRACE_ID_KEY, default=None)
_request_id_var: ContextVar[Optional[str]] = ContextVar(REQUEST_ID_KEY, default=None)


@runtime_checkable
class ILogger(Protocol):
    """What adapters and routes need from a logger."""

    def trace_context(
        self, trace_id: Optional[str] = None, request_id: Optional[str] = None
    ) -> Iterator[None]: ...

    def set_trace_id(self, trace_id: str) -> None: ...

    def get_trace_id(self) -> Optional[str]: ...

    def set_request_id(self, request_id: str) -> None: ...

    def get_request_id(self) -> Optional[str]: ...

    def debug(self, message: str, **kwargs) -> None: ...

    def info(self, message: str, **kwargs) -> None: ...

    def warning(self, message: str, **kwargs) -> None: ...

    def error(self, message: str, **kwargs) -> None: ...

    def critical(self, message: str, **kwargs) -> None: ...

    def exception(self, message: str, **kwargs) -> None: ...


def _render_fields(fields: dict[str, Any]) -> str:
    if not fields:
        return ""
    return " ".join(f"{key}={value}" for key, value in fields.items())


class Logger(ILogger):
    """Loguru wrapper injected into adapters, the scorer and the orchestrator.

    Structured context is passed as ``extra={...}`` and rendered as
    ``key=value`` pairs after the message, so callers never have to embed
    braces in the message itself.

    Usage:
        logger = Logger(LoggerConfig(level="INFO"))
        with logger.trace_context(request_id="req_123"):
            logger.info("[Orchestrator] Pipeline started", extra={"vibe": "solarpunk"})
    """

    def __init__(self, config: LoggerConfig):
        self.config = config
        self._loguru = _loguru_logger.bind(**{SERVICE_KEY: config.service_name})

        _loguru_logger.remove()

        if self.config.enable_console:
            self._add_console_handler()

    def _add_console_handler(self) -> None:
        """Single stdout sink; each line carries service, request id and rendered extras."""
        service_name = self.config.service_name
        show_extra = self.config.show_extra

        def patch_record(record):
            extra = record["extra"]
            extra.setdefault(SERVICE_KEY, service_name)
            extra[TRACE_ID_KEY] = _trace_id_var.get() or _request_id_var.get() or "-"
            fields = extra.get(EXTRA_KWARG)
            extra[FIELDS_KEY] = _render_fields(fields) if (show_extra and fields) else ""
            return True

        format_str = (
            f"{LOG_FORMAT_TIME} | {LOG_FORMAT_LEVEL} | {LOG_FORMAT_SERVICE} | "
            f"{LOG_FORMAT_TRACE} | {LOG_FORMAT_LOCATION} - {LOG_FORMAT_MESSAGE} "
            f"{LOG_FORMAT_EXTRA}"
        )

        _loguru_logger.add(
            sys.stdout,
            colorize=self.config.colorize,
            format=format_str,
            level=self.config.level.value,
            filter=patch_record,
        )

    @contextmanager
    def trace_context(
        self, trace_id: Optional[str] = None, request_id: Optional[str] = None
    ):
        """Tag every line logged inside the block with the given request id.

        The request middleware opens one of these per HTTP call.
        """
        trace_token = _trace_id_var.set(trace_id) if trace_id else None
        request_token = _request_id_var.set(request_id) if request_id else None
        try:
            yield
        finally:
            if trace_token is not None:
                _trace_id_var.reset(trace_token)
            if request_token is not None:
                _request_id_var.reset(request_token)

    def set_trace_id(self, trace_id: str) -> None:
        _trace_id_var.set(trace_id)

    def get_trace_id(self) -> Optional[str]:
        return _trace_id_var.get()

    def set_request_id(self, request_id: str) -> None:
        _request_id_var.set(request_id)

    def get_request_id(self) -> Optional[str]:
        return _request_id_var.get()

    def debug(self, message: str, **kwargs) -> None:
        self._log("DEBUG", message, kwargs)

    def info(self, message: str, **kwargs) -> None:
        self._log("INFO", message, kwargs)

    def warning(self, message: str, **kwargs) -> None:
        self._log("WARNING", message, kwargs)

    def error(self, message: str, **kwargs) -> None:
        self._log("ERROR", message, kwargs)

    def critical(self, message: str, **kwargs) -> None:
        self._log("CRITICAL", message, kwargs)

    def exception(self, message: str, **kwargs) -> None:
        """Log at ERROR level with the active traceback attached."""
        extra = kwargs.pop(EXTRA_KWARG, None) or {}
        self._loguru.opt(depth=1, exception=True).bind(**{EXTRA_KWARG: extra}).error(
            message
        )

    def _log(self, level: str, message: str, kwargs: dict[str, Any]) -> None:
        # Route extra through bind() so loguru never str.format()s the message
        extra = kwargs.pop(EXTRA_KWARG, None) or {}
        self._loguru.opt(depth=2).bind(**{EXTRA_KWARG: extra}).log(level, message)


__all__ = [
    "Logger",
    "ILogger",
    "LoggerConfig",
]
