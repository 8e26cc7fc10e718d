"""Object index construction from granted permissions.

Pure functions; the caller supplies the inheritance path it walked. This
module never traverses relation graphs itself.
"""

from collections.abc import Iterable, Sequence

from rebac.core.constants import TUPLE_RELATION_SEP, WILDCARD
from rebac.domain.entities.object_index import ObjectIndexEntry
from rebac.domain.value_objects.core import (
    ANY_ENTITY,
    EntityRef,
    Identifier,
    SpecificEntity,
)


def _resolve_entity(role: str, object: str) -> EntityRef:
    # A wildcard role or object grants on every object of the type.
    if role == WILDCARD or object == WILDCARD:
        return ANY_ENTITY
    return SpecificEntity(identifier=Identifier.parse(object, field="object"), role=role)


def build_index_entry(
    subject: str,
    permission: str,
    role: str,
    object: str,
    inheritance_tree: Sequence[str],
) -> ObjectIndexEntry:
    """Build the index row for one grant.

    Args:
        subject: "<type>:<id>" the permission is granted on.
        permission: Permission name (e.g. 'read').
        role: Role through which the entity holds it, or "*".
        object: "<type>:<id>" holding the role, or "*".
        inheritance_tree: Relations traversed to derive the grant, passed through.

    Returns:
        ObjectIndexEntry; entity is ANY_ENTITY when role or object is "*".
    """
    subject_identifier = Identifier.parse(subject, field="subject")
    return ObjectIndexEntry(
        subject=f"{subject}{TUPLE_RELATION_SEP}{permission}",
        subject_id=subject_identifier.id,
        subject_type=subject_identifier.type,
        subject_permission=permission,
        entity=_resolve_entity(role, object),
        inheritance_tree=tuple(inheritance_tree),
    )


def build_index_entries(
    subject: str,
    permission: str,
    grants: Iterable[tuple[str, str, Sequence[str]]],
) -> list[ObjectIndexEntry]:
    """Build one entry per (role, object, inheritance_tree) grant."""
    return [
        build_index_entry(subject, permission, role, object, tree)
        for role, object, tree in grants
    ]
