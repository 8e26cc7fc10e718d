"""SQL-backed decision store (implements IDecisionStore)."""

from __future__ import annotations

from typing import Any

from sqlalchemy import TextClause, select, text
from sqlalchemy.ext.asyncio import AsyncSession

from rebac.application.services.access_list_query import dialect_for_backend
from rebac.domain.enums import SqlDialect
from rebac.infrastructure.persistence.models.permission import Permission
from rebac.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


def access_list_clause(query: str) -> TextClause:
    """Wrap generated query text for execution.

    Colons are escaped so identifiers such as "user:1" are never read as
    bind parameters.
    """
    return text(query.replace(":", r"\:"))


class SqlDecisionStore:
    """Evaluates tuples and access-list queries against the relational store.

    The dialect defaults to the one matching the session's bind
    (postgresql -> POSTGRES, anything else -> SQL).
    """

    def __init__(self, db: AsyncSession, dialect: SqlDialect | None = None) -> None:
        self.db = db
        self._dialect = dialect

    @property
    def dialect(self) -> SqlDialect:
        if self._dialect is None:
            self._dialect = dialect_for_backend(self.db.get_bind().dialect.name)
        return self._dialect

    async def has_tuple(self, computed_tuple: str) -> bool:
        """Return True if a permission row with this exact computedTuple exists."""
        query = (
            select(Permission.id)
            .where(Permission.computed_tuple == computed_tuple)
            .limit(1)
        )
        result = await self.db.execute(query)
        found = result.first() is not None
        logger.debug("Tuple lookup %s: %s", computed_tuple, found)
        return found

    async def fetch_access_list(self, query: str) -> list[dict[str, Any]]:
        """Execute generated access-list text; return each row as a dict."""
        result = await self.db.execute(access_list_clause(query))
        return [dict(row) for row in result.mappings().all()]
