"""Persistence models: materialized relation tables."""

from rebac.infrastructure.persistence.models.index import ActorIndex, ObjectIndex
from rebac.infrastructure.persistence.models.mixins import DocumentIdMixin
from rebac.infrastructure.persistence.models.permission import Permission

__all__ = ["ActorIndex", "DocumentIdMixin", "ObjectIndex", "Permission"]
