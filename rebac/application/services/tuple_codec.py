"""Tuple encoding: (subject, relation, object) <-> "<subject>#<relation>@<object>".

The same encoding serves relation tuples and permission tuples; which one a
string represents is decided by the caller. Identifiers must not contain
"#" or "@" (not enforced by compute_tuple); otherwise the encoding is not
injective.
"""

from rebac.core.constants import TUPLE_OBJECT_SEP, TUPLE_RELATION_SEP
from rebac.domain.exceptions import ValidationException
from rebac.domain.value_objects.core import Identifier, RelationTuple


def compute_tuple(subject: str, relation: str, object: str) -> str:
    """Return the canonical tuple string for a triple."""
    return RelationTuple(subject=subject, relation=relation, object=object).computed


def compute_relation_tuple(subject: str, relation: str, object: str) -> str:
    """Canonical string for a relation tuple (e.g. user:1#owner@doc:42)."""
    return compute_tuple(subject, relation, object)


def compute_permission_tuple(subject: str, permission: str, object: str) -> str:
    """Canonical string for a permission tuple (e.g. user:1#read@doc:42)."""
    return compute_tuple(subject, permission, object)


def parse_tuple(value: str) -> RelationTuple:
    """Split a canonical tuple string back into its triple.

    Splits on the first "#" and then on the first "@" after it.

    Raises:
        ValidationException: If a separator is missing or either side is
            not a "<type>:<id>" identifier.
    """
    subject, rel_sep, rest = value.partition(TUPLE_RELATION_SEP)
    relation, obj_sep, object = rest.partition(TUPLE_OBJECT_SEP)
    if not rel_sep or not obj_sep or not relation:
        raise ValidationException(f"Malformed tuple: {value!r}", field="tuple")
    Identifier.parse(subject, field="subject")
    Identifier.parse(object, field="object")
    return RelationTuple(subject=subject, relation=relation, object=object)
