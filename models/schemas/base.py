"""Response envelopes shared by every route."""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with a ``Z`` suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class CamelModel(BaseModel):
    """Base for request bodies: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ApiResponse(BaseModel):
    """Success envelope."""
    data: Any
    message: Optional[str] = None
    timestamp: str = Field(default_factory=utc_timestamp)
    meta: Optional[Dict[str, Any]] = None


class ErrorBody(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    status_code: int = Field(serialization_alias="statusCode")
    code: Optional[str] = None
    details: Optional[Dict[str, Any]] = None


class ErrorResponse(BaseModel):
    """Error envelope."""
    error: ErrorBody
    timestamp: str = Field(default_factory=utc_timestamp)


def error_content(
    message: str,
    status_code: int,
    code: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """JSON-ready error envelope."""
    envelope = ErrorResponse(
        error=ErrorBody(message=message, status_code=status_code, code=code, details=details)
    )
    return envelope.model_dump(by_alias=True)


__all__ = [
    "utc_timestamp",
    "CamelModel",
    "ApiResponse",
    "ErrorBody",
    "ErrorResponse",
    "error_content",
]
