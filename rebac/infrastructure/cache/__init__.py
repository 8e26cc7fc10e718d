"""Cache: decision cache, Redis key-value adapter, and key builders."""

from rebac.infrastructure.cache.decision_cache import DecisionCache
from rebac.infrastructure.cache.keys import rule_cache_key
from rebac.infrastructure.cache.redis_cache import RedisKeyValueStore

__all__ = ["DecisionCache", "RedisKeyValueStore", "rule_cache_key"]
