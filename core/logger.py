"""
Process-wide logger instance.

Built once from settings and shared by the HTTP layer and the entrypoint;
the same instance is injected into adapters and the orchestrator at startup.

Loguru formatting note: pass structured context as ``extra={...}`` or use
f-strings. printf-style ``%s`` placeholders are not interpolated.
"""

from pathlib import Path
from typing import Optional

from core.config import get_settings
from pkg.logger.logger import Logger, LoggerConfig


def format_exception_short(exception: Exception, context: Optional[str] = None) -> str:
    """
    Format exception to be short and readable.

    Example:
        >>> try:
        ...     raise ValueError("Invalid input")
        ... except ValueError as e:
        ...     print(format_exception_short(e, "Expanding theme"))
        Expanding theme | ValueError: Invalid input | (gpt.py:12)
    """
    exc_type = type(exception).__name__
    tb = exception.__traceback__
    if tb:
        while tb.tb_next:
            tb = tb.tb_next
        location = f"{Path(tb.tb_frame.f_code.co_filename).name}:{tb.tb_lineno}"
    else:
        location = "unknown"

    parts = []
    if context:
        parts.append(context)
    parts.append(f"{exc_type}: {exception}")
    parts.append(f"({location})")
    return " | ".join(parts)


def setup_logger() -> Logger:
    """Build the shared Logger from settings."""
    settings = get_settings()

    level = settings.log_level or ("DEBUG" if settings.debug else "INFO")
    try:
        config = LoggerConfig(
            level=level,
            colorize=settings.log_colorize,
            service_name=settings.service_name,
        )
    except ValueError:
        config = LoggerConfig(
            colorize=settings.log_colorize, service_name=settings.service_name
        )
    return Logger(config)


logger = setup_logger()

__all__ = ["logger", "format_exception_short", "setup_logger"]
