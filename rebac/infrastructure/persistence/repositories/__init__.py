"""Persistence repositories. Re-exports for dependency injection."""

from rebac.infrastructure.persistence.repositories.object_index_repo import (
    ObjectIndexRepository,
)

__all__ = ["ObjectIndexRepository"]
