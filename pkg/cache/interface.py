"""Interface for cache operations."""

from typing import Any, Awaitable, Callable, Dict, List, Optional, Protocol, Union, runtime_checkable

TTL = Union[str, int, float]


@runtime_checkable
class ICache(Protocol):
    """Protocol for cache operations.

    Implementations are safe for concurrent use from a single event loop.
    """

    async def get(self, key: str) -> Optional[Any]:
        """Get value by key, None when missing or expired."""
        ...

    async def set(self, key: str, value: Any, ttl: TTL) -> None:
        """Store value under key with a TTL class name or seconds."""
        ...

    async def has(self, key: str) -> bool:
        """Check if a live entry exists."""
        ...

    async def delete(self, key: str) -> bool:
        """Delete key."""
        ...

    async def get_or_set(
        self, key: str, factory: Callable[[], Awaitable[Any]], ttl: TTL
    ) -> Any:
        """Return the cached value or compute, store and return it."""
        ...

    async def mget(self, keys: List[str]) -> Dict[str, Optional[Any]]:
        """Get multiple values by keys."""
        ...

    async def mset(self, entries: Dict[str, Any], ttl: TTL) -> None:
        """Set multiple key-value pairs."""
        ...

    async def keys(self, pattern: Optional[str] = None) -> List[str]:
        """List keys, optionally filtered by a ``*`` wildcard pattern."""
        ...

    async def delete_by_pattern(self, pattern: str) -> int:
        """Delete keys matching a wildcard pattern. Returns count deleted."""
        ...

    async def close(self) -> None:
        """Stop background work."""
        ...


__all__ = ["ICache", "TTL"]
