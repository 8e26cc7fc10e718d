"""Domain layer: entities, value objects, enums, and exceptions.

No dependencies on infrastructure. Used by application and
infrastructure layers.
"""

from rebac.domain.entities import ObjectIndexEntry
from rebac.domain.enums import SqlDialect
from rebac.domain.exceptions import (
    AuthorizationException,
    RebacException,
    SqlNotConfiguredException,
    UnsupportedDialectException,
    ValidationException,
)
from rebac.domain.value_objects import (
    ANY_ENTITY,
    AnyEntity,
    CacheLookup,
    EntityRef,
    Identifier,
    RelationTuple,
    SpecificEntity,
)

__all__ = [
    "ANY_ENTITY",
    "AnyEntity",
    "AuthorizationException",
    "CacheLookup",
    "EntityRef",
    "Identifier",
    "ObjectIndexEntry",
    "RebacException",
    "RelationTuple",
    "SpecificEntity",
    "SqlDialect",
    "SqlNotConfiguredException",
    "UnsupportedDialectException",
    "ValidationException",
]
