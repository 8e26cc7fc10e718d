"""Object index domain entity.

Materialized grant record, independent of persistence.
"""

from dataclasses import dataclass
from typing import Any

from rebac.domain.value_objects.core import EntityRef


@dataclass(frozen=True)
class ObjectIndexEntry:
    """Denormalized grant: subject + permission -> entity it may act on.

    subject is "<subjectType>:<subjectId>#<permission>". entity is either a
    SpecificEntity or AnyEntity; the latter asserts the grant holds for every
    object of the applicable type. inheritance_tree records the relations
    traversed to derive the grant (audit only, never re-evaluated).
    """

    subject: str
    subject_id: str
    subject_type: str
    subject_permission: str
    entity: EntityRef
    inheritance_tree: tuple[str, ...] = ()

    @property
    def is_wildcard(self) -> bool:
        return self.entity.is_wildcard

    @property
    def entity_key(self) -> str:
        return self.entity.key

    @property
    def entity_id(self) -> str:
        return self.entity.entity_id

    @property
    def entity_type(self) -> str:
        return self.entity.entity_type

    @property
    def relation(self) -> str:
        return self.entity.relation

    def to_record(self) -> dict[str, Any]:
        """Return the stored field mapping (camelCase column names).

        Returns:
            Dict with subject, subjectId, subjectType, subjectPermission,
            entity, entityId, entityType, relation, inheritanceTree.
        """
        return {
            "subject": self.subject,
            "subjectId": self.subject_id,
            "subjectType": self.subject_type,
            "subjectPermission": self.subject_permission,
            "entity": self.entity_key,
            "entityId": self.entity_id,
            "entityType": self.entity_type,
            "relation": self.relation,
            "inheritanceTree": list(self.inheritance_tree),
        }
