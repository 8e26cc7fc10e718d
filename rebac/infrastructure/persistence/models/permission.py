"""Permission tuple ORM model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from rebac.core.constants import DEFAULT_PERMISSION_TABLE
from rebac.infrastructure.persistence.database import Base
from rebac.infrastructure.persistence.models.mixins import DocumentIdMixin


class Permission(DocumentIdMixin, Base):
    """Persisted permission tuple. Table: cnd_Permission. computedTuple is the lookup key."""

    __tablename__ = DEFAULT_PERMISSION_TABLE

    resource: Mapped[str] = mapped_column(String, nullable=False)
    permission: Mapped[str] = mapped_column(String, nullable=False)
    subject: Mapped[str] = mapped_column(String, nullable=False)
    computed_tuple: Mapped[str] = mapped_column(
        "computedTuple", String, nullable=False, index=True
    )
