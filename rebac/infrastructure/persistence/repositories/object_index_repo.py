"""Object index repository: persists materialized grant rows."""

from collections.abc import Iterable

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from rebac.domain.entities.object_index import ObjectIndexEntry
from rebac.infrastructure.persistence.models.index import ObjectIndex


def _to_model(entry: ObjectIndexEntry) -> ObjectIndex:
    return ObjectIndex(
        subject=entry.subject,
        subject_id=entry.subject_id,
        subject_type=entry.subject_type,
        subject_permission=entry.subject_permission,
        entity=entry.entity_key,
        entity_id=entry.entity_id,
        entity_type=entry.entity_type,
        relation=entry.relation,
        inheritance_tree=list(entry.inheritance_tree),
    )


class ObjectIndexRepository:
    """Writes ObjectIndexEntry rows. Re-materialization replaces rows per subject key."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def add_entries(self, entries: Iterable[ObjectIndexEntry]) -> list[ObjectIndex]:
        """Persist entries and return the created rows (flushed, not committed)."""
        rows = [_to_model(entry) for entry in entries]
        self.db.add_all(rows)
        await self.db.flush()
        return rows

    async def replace_for_subject(
        self, subject: str, entries: Iterable[ObjectIndexEntry]
    ) -> list[ObjectIndex]:
        """Delete rows for subject ("<type>:<id>#<permission>") and add entries."""
        await self.db.execute(delete(ObjectIndex).where(ObjectIndex.subject == subject))
        return await self.add_entries(entries)

    async def get_by_subject(self, subject: str) -> list[ObjectIndex]:
        """Return rows whose subject key equals subject."""
        result = await self.db.execute(
            select(ObjectIndex).where(ObjectIndex.subject == subject)
        )
        return list(result.scalars().all())
