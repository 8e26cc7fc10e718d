"""Relation and query-input validation.

validate() gates every (subject, relation, object) triple before a tuple is
computed, cached or queried. validate_access_list_inputs() gates the values
interpolated into access-list SQL, which performs no escaping of its own.
"""

import re

from rebac.core.constants import (
    IDENTIFIER_SEP,
    TUPLE_OBJECT_SEP,
    TUPLE_RELATION_SEP,
)
from rebac.domain.exceptions import ValidationException

RELATION_RE = re.compile(r"[a-zA-Z]+")
SQL_IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

# Characters that would terminate a SQL string literal or comment it out.
_UNSAFE_SQL_CHARS = frozenset("'\"\\;")
_RESERVED_TUPLE_CHARS = frozenset(TUPLE_RELATION_SEP + TUPLE_OBJECT_SEP)


def validate(subject: str, relation: str, object: str) -> None:
    """Reject a malformed triple. Checks run in order and fail fast.

    Args:
        subject: Subject identifier, "<type>:<id>".
        relation: Relation or permission name, letters only.
        object: Object identifier, "<type>:<id>".

    Raises:
        ValidationException: If subject or object has no colon, relation is
            empty or not letters-only, or subject equals object.
    """
    if IDENTIFIER_SEP not in subject:
        raise ValidationException(
            "Subject must be a valid resource identifier", field="subject"
        )
    if IDENTIFIER_SEP not in object:
        raise ValidationException(
            "Object must be a valid resource identifier", field="object"
        )
    if not RELATION_RE.fullmatch(relation):
        raise ValidationException("Relation must be a plain string", field="relation")
    if subject == object:
        raise ValidationException(
            "Subject and object must be different", field="object"
        )


def _reject_unsafe(value: str, field: str) -> None:
    if any(ch in _UNSAFE_SQL_CHARS for ch in value):
        raise ValidationException(
            f"{field} contains characters not allowed in a query", field=field
        )


def validate_access_list_inputs(
    subject: str,
    action: str,
    object_type: str,
    object_type_collection: str,
) -> None:
    """Validate every value that build_access_list_query interpolates.

    Subject must be an identifier free of tuple separators and quote
    characters. Action follows the relation rule. Object type and collection
    must be plain SQL identifiers.

    Raises:
        ValidationException: On the first invalid input.
    """
    if IDENTIFIER_SEP not in subject:
        raise ValidationException(
            "Subject must be a valid resource identifier", field="subject"
        )
    if any(ch in _RESERVED_TUPLE_CHARS for ch in subject):
        raise ValidationException(
            "Subject must not contain tuple separators", field="subject"
        )
    _reject_unsafe(subject, "subject")
    if not RELATION_RE.fullmatch(action):
        raise ValidationException("Action must be a plain string", field="action")
    if not SQL_IDENTIFIER_RE.fullmatch(object_type):
        raise ValidationException(
            "Object type must be a plain identifier", field="object_type"
        )
    if not SQL_IDENTIFIER_RE.fullmatch(object_type_collection):
        raise ValidationException(
            "Object type collection must be a plain identifier",
            field="object_type_collection",
        )
