"""Base repository: bulk reads by primary key and create."""

from collections.abc import Collection
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from quicksearch.infrastructure.persistence.database import Base


class BaseRepository[ModelType: Base]:
    """Base repository with get_by_ids and create.

    Works on a session owned by the caller; the repository never opens or
    closes sessions itself.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def get_by_ids(self, entity_ids: Collection[str]) -> list[ModelType]:
        """Return records whose primary key is in entity_ids (one query, no order, missing ids skipped)."""
        if not entity_ids:
            return []
        model: Any = self.model
        result = await self.db.execute(
            select(self.model).where(model.id.in_(list(entity_ids)))
        )
        return list(result.scalars().all())

    async def create(self, obj: ModelType) -> ModelType:
        """Persist a new record (flush + refresh; caller commits)."""
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj
