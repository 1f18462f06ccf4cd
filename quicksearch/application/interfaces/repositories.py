"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from quicksearch.application.dtos.component import (
        ComponentResult,
        OrganizationResult,
    )
    from quicksearch.application.dtos.suggestion import (
        ComponentHitsPerQualifier,
        ComponentIndexQuery,
    )


# Component index interface
class IComponentIndex(Protocol):
    """Protocol for the full-text component index (ranking is the index's job)."""

    async def search(
        self, query: ComponentIndexQuery
    ) -> list[ComponentHitsPerQualifier]:
        """Return ranked hits per qualifier. Qualifiers without hits are omitted; at most query.limit hits each."""


# Component store interface (authoritative relational data)
class IComponentStore(Protocol):
    """Protocol for bulk resolution of components and organizations by id.

    Best-effort bulk: ids that do not exist are absent from the returned
    mapping. Each call scopes its own database session.
    """

    async def resolve_components(self, ids: set[str]) -> dict[str, ComponentResult]:
        """Return components by id in one bulk read."""

    async def resolve_organizations(
        self, ids: set[str]
    ) -> dict[str, OrganizationResult]:
        """Return organizations by id in one bulk read."""
