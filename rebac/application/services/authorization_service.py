"""Authorization service: relation checks and access lists with a decision cache.

Resolution pipeline for one check:
validate -> compute tuple -> cache lookup -> (hit: return) |
(miss: store evaluates -> cache store -> return).

No locking and no coalescing: two concurrent misses on the same tuple both
query the store. Store and cache errors propagate unchanged.
"""

from __future__ import annotations

from typing import Any

from rebac.application.interfaces.services import IDecisionCache, IDecisionStore
from rebac.application.services.access_list_query import (
    DEFAULT_TABLES,
    AccessListTables,
    build_access_list_query,
)
from rebac.application.services.relation_validator import (
    validate,
    validate_access_list_inputs,
)
from rebac.application.services.tuple_codec import compute_permission_tuple
from rebac.core.constants import IDENTIFIER_SEP
from rebac.domain.enums import SqlDialect
from rebac.domain.exceptions import AuthorizationException
from rebac.shared.telemetry.logging import get_logger
from rebac.shared.telemetry.tracing import add_span_attributes, traced

logger = get_logger(__name__)


class AuthorizationService:
    """Centralized relation checks; uses the decision cache when one is given."""

    def __init__(
        self,
        decision_store: IDecisionStore,
        decision_cache: IDecisionCache | None = None,
        tables: AccessListTables = DEFAULT_TABLES,
    ) -> None:
        self.decision_store = decision_store
        self.decision_cache = decision_cache
        self.tables = tables

    @traced("rebac.check")
    async def check(self, subject: str, relation: str, object: str) -> bool:
        """Return True if subject holds relation (or permission) on object.

        Raises:
            ValidationException: If the triple is malformed; neither the
                cache nor the store is touched.
        """
        validate(subject, relation, object)
        computed = compute_permission_tuple(subject, relation, object)

        if self.decision_cache is not None:
            cached = await self.decision_cache.lookup(computed)
            if cached.is_hit:
                add_span_attributes(cache_hit=True)
                return bool(cached.decision)

        decision = await self.decision_store.has_tuple(computed)
        logger.debug("Evaluated %s: %s", computed, decision)
        if self.decision_cache is not None:
            await self.decision_cache.store(computed, decision)
        add_span_attributes(cache_hit=False)
        return decision

    async def require(self, subject: str, relation: str, object: str) -> None:
        """Raise AuthorizationException if check() is False."""
        if not await self.check(subject, relation, object):
            raise AuthorizationException(
                subject=subject, relation=relation, object=object
            )

    @traced("rebac.access_list")
    async def get_access_list(
        self,
        subject: str,
        action: str,
        object_type: str,
        object_type_collection: str,
        dialect: SqlDialect | None = None,
    ) -> list[dict[str, Any]]:
        """Return rows of object_type_collection subject may perform action on.

        Inputs are validated before the query is built. The direct-tuple
        branch matches every permission tuple prefixed with
        "<subject>#<action>@<object_type>:".

        Raises:
            ValidationException: If any input is malformed.
        """
        validate_access_list_inputs(subject, action, object_type, object_type_collection)
        prefix = compute_permission_tuple(
            subject, action, f"{object_type}{IDENTIFIER_SEP}"
        )
        query = build_access_list_query(
            dialect or self.decision_store.dialect,
            object_type_collection,
            prefix,
            subject,
            object_type,
            action,
            tables=self.tables,
        )
        rows = await self.decision_store.fetch_access_list(query)
        logger.debug(
            "Access list for %s (%s on %s): %d rows",
            subject,
            action,
            object_type_collection,
            len(rows),
        )
        return rows
