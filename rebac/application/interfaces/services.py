"""Service interfaces (ports) for the application layer.

Protocols define contracts for the external collaborators (DIP): the
key-value service behind the decision cache and the relational store that
evaluates tuples and access lists.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from rebac.domain.enums import SqlDialect
    from rebac.domain.value_objects.core import CacheLookup


# Key-value service interface
class IKeyValueStore(Protocol):
    """Protocol for a key-value service with per-key expiry (e.g. Redis)."""

    async def set_with_expiry(self, key: str, value: str, ttl_ms: int) -> None:
        """Store value under key; the service expires it after ttl_ms milliseconds."""

    async def get(self, key: str) -> str | None:
        """Return the stored value, or None when absent or expired."""

    async def delete(self, key: str) -> None:
        """Remove key if present."""


# Decision cache interface
class IDecisionCache(Protocol):
    """Protocol for the short-lived cache of boolean decisions by computed tuple."""

    async def store(self, computed_tuple: str, decision: bool) -> None:
        """Cache decision for computed_tuple, overwriting any previous entry."""

    async def lookup(self, computed_tuple: str) -> CacheLookup:
        """Return Hit(decision) or Miss."""


# Decision store interface
class IDecisionStore(Protocol):
    """Protocol for the relational store holding tuples and index rows."""

    @property
    def dialect(self) -> SqlDialect:
        """Query dialect the store executes."""

    async def has_tuple(self, computed_tuple: str) -> bool:
        """Return True if a permission tuple with exactly this computed form exists."""

    async def fetch_access_list(self, query: str) -> list[dict[str, Any]]:
        """Execute generated access-list text and return rows as dicts."""
