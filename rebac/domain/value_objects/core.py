"""Domain value objects for the rebac core.

Value objects are immutable types that represent domain concepts with
self-validation. They have no identity, only value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from rebac.core.constants import (
    IDENTIFIER_SEP,
    TUPLE_OBJECT_SEP,
    TUPLE_RELATION_SEP,
    WILDCARD,
)
from rebac.domain.exceptions import ValidationException


@dataclass(frozen=True)
class Identifier:
    """Resource identifier "<type>:<id>".

    Only the first colon delimits; the id part may itself contain colons
    (e.g. "user:abc:def" has type "user" and id "abc:def").
    """

    type: str
    id: str

    @classmethod
    def parse(cls, value: str, field: str = "identifier") -> Identifier:
        """Split value on its first colon.

        Raises:
            ValidationException: If value contains no colon.
        """
        type_, sep, id_ = value.partition(IDENTIFIER_SEP)
        if not sep:
            raise ValidationException(
                f"{field.capitalize()} must be a valid resource identifier", field=field
            )
        return cls(type=type_, id=id_)

    def __str__(self) -> str:
        return f"{self.type}{IDENTIFIER_SEP}{self.id}"


@dataclass(frozen=True)
class RelationTuple:
    """(subject, relation-or-permission, object) triple.

    Relation and permission tuples share this shape; the caller decides
    which one a given instance represents.
    """

    subject: str
    relation: str
    object: str

    @property
    def computed(self) -> str:
        """Canonical form "<subject>#<relation>@<object>"."""
        return (
            f"{self.subject}{TUPLE_RELATION_SEP}{self.relation}"
            f"{TUPLE_OBJECT_SEP}{self.object}"
        )

    @property
    def subject_identifier(self) -> Identifier:
        return Identifier.parse(self.subject, field="subject")

    @property
    def object_identifier(self) -> Identifier:
        return Identifier.parse(self.object, field="object")


@dataclass(frozen=True)
class SpecificEntity:
    """Grant target bound to one object through a role (e.g. doc:42#owner)."""

    identifier: Identifier
    role: str

    is_wildcard: ClassVar[bool] = False

    @property
    def key(self) -> str:
        return f"{self.identifier}{TUPLE_RELATION_SEP}{self.role}"

    @property
    def entity_id(self) -> str:
        return self.identifier.id

    @property
    def entity_type(self) -> str:
        return self.identifier.type

    @property
    def relation(self) -> str:
        return self.role


@dataclass(frozen=True)
class AnyEntity:
    """Wildcard grant target: every object of the applicable type.

    Renders as the "*" sentinel in every stored column.
    """

    is_wildcard: ClassVar[bool] = True

    @property
    def key(self) -> str:
        return WILDCARD

    @property
    def entity_id(self) -> str:
        return WILDCARD

    @property
    def entity_type(self) -> str:
        return WILDCARD

    @property
    def relation(self) -> str:
        return WILDCARD


ANY_ENTITY = AnyEntity()

EntityRef = SpecificEntity | AnyEntity


@dataclass(frozen=True)
class CacheLookup:
    """Tri-state decision cache result: Hit(True), Hit(False) or Miss.

    A miss carries no decision; callers must check is_hit before reading
    decision so that an absent entry is never read as a denial.
    """

    is_hit: bool
    decision: bool | None = None

    @classmethod
    def hit(cls, decision: bool) -> CacheLookup:
        return cls(is_hit=True, decision=decision)

    @classmethod
    def miss(cls) -> CacheLookup:
        return cls(is_hit=False)

    @property
    def is_miss(self) -> bool:
        return not self.is_hit
