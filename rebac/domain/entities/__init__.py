"""Domain entities.

Pure domain models; no ORM or persistence concerns.
"""

from rebac.domain.entities.object_index import ObjectIndexEntry

__all__ = ["ObjectIndexEntry"]
