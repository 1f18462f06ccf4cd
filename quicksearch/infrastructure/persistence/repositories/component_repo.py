"""Component repository. Returns application DTOs."""

from __future__ import annotations

from collections.abc import Collection

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from quicksearch.application.dtos.component import ComponentResult
from quicksearch.domain.enums import Qualifier
from quicksearch.infrastructure.persistence.models.component import Component
from quicksearch.infrastructure.persistence.repositories.base import BaseRepository


def _component_to_result(c: Component) -> ComponentResult:
    """Map ORM Component to application ComponentResult (name is the display name)."""
    return ComponentResult(
        id=c.id,
        organization_id=c.organization_id,
        key=c.key,
        name=c.display_name,
        qualifier=c.qualifier,
    )


class ComponentRepository(BaseRepository[Component]):
    """Component reads (bulk by id, by key) and creation for seeding."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Component)

    async def get_results_by_ids(
        self, component_ids: Collection[str]
    ) -> list[ComponentResult]:
        """Return components for the given ids in one query (enabled or not)."""
        return [_component_to_result(c) for c in await self.get_by_ids(component_ids)]

    async def get_by_key(self, key: str) -> ComponentResult | None:
        """Return component by its unique key."""
        result = await self.db.execute(select(Component).where(Component.key == key))
        component = result.scalar_one_or_none()
        return _component_to_result(component) if component else None

    async def create_component(
        self,
        organization_id: str,
        key: str,
        name: str,
        qualifier: Qualifier,
        long_name: str | None = None,
        path: str | None = None,
        enabled: bool = True,
    ) -> ComponentResult:
        """Insert a component and return it."""
        component = await self.create(
            Component(
                organization_id=organization_id,
                key=key,
                name=name,
                long_name=long_name,
                qualifier=qualifier.value,
                path=path,
                enabled=enabled,
            )
        )
        return _component_to_result(component)
