"""Interface for upstream JSON HTTP clients."""

from typing import Any, Dict, Optional, Protocol, runtime_checkable


@runtime_checkable
class IHttpClient(Protocol):
    """Protocol for JSON-over-HTTP calls against a single provider."""

    service_name: str

    async def get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """GET path and decode the JSON body."""
        ...

    async def post_json(
        self,
        path: str,
        body: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """POST a JSON body and decode the JSON response."""
        ...

    async def close(self) -> None:
        """Close underlying connections."""
        ...


__all__ = ["IHttpClient"]
