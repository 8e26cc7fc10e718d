"""Composition root: builds the authorization service from settings.

The only place that wires infrastructure implementations (SQL store, Redis
cache) into application services.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from rebac.application.interfaces.services import IKeyValueStore
from rebac.application.services.access_list_query import AccessListTables
from rebac.application.services.authorization_service import AuthorizationService
from rebac.core.config import Settings, get_settings
from rebac.domain.enums import SqlDialect
from rebac.infrastructure.cache.decision_cache import DecisionCache
from rebac.infrastructure.services.decision_store import SqlDecisionStore


def tables_from_settings(settings: Settings) -> AccessListTables:
    """Table names the generated access-list SQL reads."""
    return AccessListTables(
        actor_index=settings.actor_index_table,
        object_index=settings.object_index_table,
        permission=settings.permission_table,
    )


def build_authorization_service(
    db: AsyncSession,
    key_value_store: IKeyValueStore | None = None,
    settings: Settings | None = None,
) -> AuthorizationService:
    """Build an AuthorizationService for one session.

    Args:
        db: Session the SQL decision store queries.
        key_value_store: Backend for the decision cache; no cache when None.
        settings: Overrides get_settings() (tests).

    Returns:
        AuthorizationService using the configured dialect, tables and TTL.
    """
    settings = settings or get_settings()
    cache = (
        DecisionCache(key_value_store, ttl_ms=settings.rule_cache_ttl_ms)
        if key_value_store is not None
        else None
    )
    return AuthorizationService(
        decision_store=SqlDecisionStore(db, dialect=SqlDialect(settings.sql_dialect)),
        decision_cache=cache,
        tables=tables_from_settings(settings),
    )
