"""Core constants: tuple separators, cache key prefixes, and table names.

Single source of truth for the tuple and cache key formats.
"""

# Identifier: "<type>:<id>" (split on the first colon only)
IDENTIFIER_SEP = ":"

# Tuple: "<subject>#<relation>@<object>"
TUPLE_RELATION_SEP = "#"
TUPLE_OBJECT_SEP = "@"

# Wildcard sentinel as stored in index rows and SQL literals
WILDCARD = "*"

# Decision cache
CACHE_PREFIX_RULE = "ruleCache"
CACHE_KEY_SEP = ":"
RULE_CACHE_TTL_MS = 2000

# Default table names for the materialized relations
DEFAULT_ACTOR_INDEX_TABLE = "cnd_ActorIndex"
DEFAULT_OBJECT_INDEX_TABLE = "cnd_ObjectIndex"
DEFAULT_PERMISSION_TABLE = "cnd_Permission"
