"""Organization repository. Returns application DTOs."""

from __future__ import annotations

from collections.abc import Collection

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from quicksearch.application.dtos.component import OrganizationResult
from quicksearch.infrastructure.persistence.models.organization import Organization
from quicksearch.infrastructure.persistence.repositories.base import BaseRepository


def _organization_to_result(o: Organization) -> OrganizationResult:
    """Map ORM Organization to application OrganizationResult."""
    return OrganizationResult(id=o.id, key=o.key, name=o.name)


class OrganizationRepository(BaseRepository[Organization]):
    """Organization reads (bulk by id, by key) and creation for seeding."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Organization)

    async def get_results_by_ids(
        self, organization_ids: Collection[str]
    ) -> list[OrganizationResult]:
        """Return organizations for the given ids in one query."""
        return [_organization_to_result(o) for o in await self.get_by_ids(organization_ids)]

    async def get_by_key(self, key: str) -> OrganizationResult | None:
        """Return organization by its unique key."""
        result = await self.db.execute(
            select(Organization).where(Organization.key == key)
        )
        organization = result.scalar_one_or_none()
        return _organization_to_result(organization) if organization else None

    async def create_organization(self, key: str, name: str) -> OrganizationResult:
        """Insert an organization and return it."""
        organization = await self.create(Organization(key=key, name=name))
        return _organization_to_result(organization)
