"""ActorIndex and ObjectIndex ORM models (materialized relations)."""

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from rebac.core.constants import DEFAULT_ACTOR_INDEX_TABLE, DEFAULT_OBJECT_INDEX_TABLE
from rebac.infrastructure.persistence.database import Base
from rebac.infrastructure.persistence.models.mixins import DocumentIdMixin


class ActorIndex(DocumentIdMixin, Base):
    """Actor -> entity it is associated with. Table: cnd_ActorIndex. Read-only here."""

    __tablename__ = DEFAULT_ACTOR_INDEX_TABLE

    subject: Mapped[str] = mapped_column(String, nullable=False, index=True)
    subject_id: Mapped[str] = mapped_column("subjectId", String, nullable=False)
    subject_type: Mapped[str] = mapped_column("subjectType", String, nullable=False)
    entity: Mapped[str] = mapped_column(String, nullable=False)
    entity_id: Mapped[str] = mapped_column("entityId", String, nullable=False)
    entity_type: Mapped[str] = mapped_column("entityType", String, nullable=False)


class ObjectIndex(DocumentIdMixin, Base):
    """Subject + permission -> entity (or "*"). Table: cnd_ObjectIndex."""

    __tablename__ = DEFAULT_OBJECT_INDEX_TABLE

    subject: Mapped[str] = mapped_column(String, nullable=False)
    subject_id: Mapped[str] = mapped_column("subjectId", String, nullable=False)
    subject_type: Mapped[str] = mapped_column(
        "subjectType", String, nullable=False, index=True
    )
    subject_permission: Mapped[str] = mapped_column(
        "subjectPermission", String, nullable=False
    )
    entity: Mapped[str] = mapped_column(String, nullable=False, index=True)
    entity_id: Mapped[str] = mapped_column("entityId", String, nullable=False)
    entity_type: Mapped[str] = mapped_column("entityType", String, nullable=False)
    relation: Mapped[str] = mapped_column(String, nullable=False)
    inheritance_tree: Mapped[list[str]] = mapped_column(
        "inheritanceTree", JSON, nullable=False, default=list
    )
