"""Component store: bulk resolution of components and organizations by id.

Implements IComponentStore. Every call opens its own session from the
session factory and closes it before returning, on success or failure.
"""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from quicksearch.application.dtos.component import ComponentResult, OrganizationResult
from quicksearch.infrastructure.persistence.repositories import (
    ComponentRepository,
    OrganizationRepository,
)
from quicksearch.shared.telemetry.tracing import TracedOperation

logger = logging.getLogger(__name__)


class ComponentStore:
    """Bulk reads against the component and organization tables (one query per call)."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory

    async def resolve_components(self, ids: set[str]) -> dict[str, ComponentResult]:
        """Return components by id; unknown ids are absent from the mapping."""
        if not ids:
            return {}
        async with TracedOperation("component_store.resolve_components", {"count": len(ids)}):
            async with self.session_factory() as session:
                components = await ComponentRepository(session).get_results_by_ids(ids)
        if len(components) != len(ids):
            logger.warning(
                "Resolved %d of %d requested components", len(components), len(ids)
            )
        return {c.id: c for c in components}

    async def resolve_organizations(
        self, ids: set[str]
    ) -> dict[str, OrganizationResult]:
        """Return organizations by id; unknown ids are absent from the mapping."""
        if not ids:
            return {}
        async with TracedOperation(
            "component_store.resolve_organizations", {"count": len(ids)}
        ):
            async with self.session_factory() as session:
                organizations = await OrganizationRepository(
                    session
                ).get_results_by_ids(ids)
        return {o.id: o for o in organizations}
