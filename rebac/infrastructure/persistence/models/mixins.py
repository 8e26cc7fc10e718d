"""SQLAlchemy mixins for the materialized relation tables."""

from cuid2 import cuid_wrapper
from sqlalchemy import String
from sqlalchemy.orm import Mapped, declared_attr, mapped_column

_cuid_generator = cuid_wrapper()


def generate_cuid() -> str:
    """Generate a CUID2 primary key."""
    return _cuid_generator()


class DocumentIdMixin:
    """Primary key stored in the "_id" column (CUID2 default).

    Access-list queries match collection rows on _id, so every table the
    core reads or writes keeps that column name.
    """

    @declared_attr
    def id(cls) -> Mapped[str]:
        return mapped_column("_id", String, primary_key=True, default=generate_cuid)
