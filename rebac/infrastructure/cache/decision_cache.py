"""Short-lived cache of authorization decisions keyed by computed tuple.

Entries are written as "true"/"false" under ruleCache:<computedTuple> with a
fixed expiry (2000 ms by default). Nothing invalidates an entry when the
underlying tuple changes; a stale decision lives at most one TTL. invalidate()
exists for a grant/revoke path that wants stronger consistency, but this core
never calls it.
"""

from __future__ import annotations

from rebac.application.interfaces.services import IKeyValueStore
from rebac.core.constants import RULE_CACHE_TTL_MS
from rebac.domain.value_objects.core import CacheLookup
from rebac.infrastructure.cache.keys import rule_cache_key
from rebac.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

_TRUE = "true"
_FALSE = "false"


class DecisionCache:
    """Decision cache over an injected key-value store (implements IDecisionCache)."""

    def __init__(self, store: IKeyValueStore, ttl_ms: int = RULE_CACHE_TTL_MS) -> None:
        self.store_backend = store
        self.ttl_ms = ttl_ms

    async def store(self, computed_tuple: str, decision: bool) -> None:
        """Write decision for computed_tuple with the fixed TTL, overwriting any entry."""
        value = _TRUE if decision else _FALSE
        await self.store_backend.set_with_expiry(
            rule_cache_key(computed_tuple), value, self.ttl_ms
        )

    async def lookup(self, computed_tuple: str) -> CacheLookup:
        """Return Hit(True), Hit(False), or Miss when absent or expired."""
        value = await self.store_backend.get(rule_cache_key(computed_tuple))
        if value is None:
            logger.debug("Decision cache miss: %s", computed_tuple)
            return CacheLookup.miss()
        return CacheLookup.hit(value == _TRUE)

    async def invalidate(self, computed_tuple: str) -> None:
        """Drop the cached decision for computed_tuple."""
        await self.store_backend.delete(rule_cache_key(computed_tuple))
