"""Component index backed by PostgreSQL (implements IComponentIndex)."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from quicksearch.application.dtos.suggestion import (
    ComponentHitsPerQualifier,
    ComponentIndexQuery,
)
from quicksearch.infrastructure.persistence.repositories import ComponentSearchRepository
from quicksearch.shared.telemetry.tracing import TracedOperation


class SqlComponentIndex:
    """Runs ComponentSearchRepository.search in a session scoped to the call."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory

    async def search(
        self, query: ComponentIndexQuery
    ) -> list[ComponentHitsPerQualifier]:
        """Return ranked hits per qualifier (at most query.limit each)."""
        async with TracedOperation("component_index.search", {"limit": query.limit}):
            async with self.session_factory() as session:
                return await ComponentSearchRepository(session).search(
                    query.query, query.qualifiers, query.limit
                )
