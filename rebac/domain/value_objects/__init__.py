"""Domain value objects and shared value types."""

from rebac.domain.value_objects.core import (
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
    "CacheLookup",
    "EntityRef",
    "Identifier",
    "RelationTuple",
    "SpecificEntity",
]
