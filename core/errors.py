"""Application error taxonomy shared by the HTTP layer."""

from typing import Any, Dict, Optional

from core.constants import ErrorCode


class AppError(Exception):
    """Base application error rendered as the standard error envelope."""

    status_code: int = 500
    code: str = ErrorCode.INTERNAL_ERROR.value

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        if code is not None:
            self.code = code
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(AppError):
    """Malformed caller input."""

    status_code = 400
    code = ErrorCode.VALIDATION_ERROR.value


class UpstreamError(AppError):
    """A provider call failed and no fallback was acceptable."""

    status_code = 502
    code = ErrorCode.UPSTREAM_ERROR.value


class ServiceUnavailableError(AppError):
    """A required component is not initialised."""

    status_code = 503
    code = ErrorCode.SERVICE_UNAVAILABLE.value


class ConfigurationError(AppError):
    """Invalid or missing configuration."""

    status_code = 500
    code = ErrorCode.CONFIGURATION_ERROR.value


__all__ = [
    "AppError",
    "ValidationError",
    "UpstreamError",
    "ServiceUnavailableError",
    "ConfigurationError",
]
