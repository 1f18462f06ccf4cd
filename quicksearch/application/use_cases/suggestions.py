"""Component suggestions use case.

Runs one index search, resolves every referenced component and organization
with exactly one bulk read each, and joins them in memory into groups of
suggestions that keep the index's qualifier order and rank order.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from quicksearch.application.dtos.suggestion import (
    ComponentHitsPerQualifier,
    ComponentIndexQuery,
    QualifierSuggestions,
    SuggestionItem,
    SuggestionsResult,
)
from quicksearch.core.constants import (
    MINIMUM_QUERY_LENGTH,
    RESULTS_PER_QUALIFIER,
    SUGGESTION_QUALIFIERS,
)
from quicksearch.domain.exceptions import (
    ComponentNotFoundInStoreException,
    InvalidQueryException,
    OrganizationNotFoundInStoreException,
)
from quicksearch.shared.telemetry.tracing import add_span_attributes, traced

if TYPE_CHECKING:
    from quicksearch.application.dtos.component import (
        ComponentResult,
        OrganizationResult,
    )
    from quicksearch.application.interfaces.repositories import (
        IComponentIndex,
        IComponentStore,
    )

logger = logging.getLogger(__name__)


def validate_query(query: str) -> str:
    """Return the stripped query; raise InvalidQueryException if it is too short."""
    stripped = (query or "").strip()
    if len(stripped) < MINIMUM_QUERY_LENGTH:
        raise InvalidQueryException(query, MINIMUM_QUERY_LENGTH)
    return stripped


def assemble_suggestions(
    hits_per_qualifier: list[ComponentHitsPerQualifier],
    components: dict[str, ComponentResult],
    organizations: dict[str, OrganizationResult],
) -> SuggestionsResult:
    """Join index hits with resolved components and organizations.

    Keeps qualifier order and rank order of the index output. Highlighted
    text is copied as-is. Raises a DataInconsistencyException subclass on
    the first id that cannot be resolved; no partial result is returned.
    """
    groups: list[QualifierSuggestions] = []
    for group in hits_per_qualifier:
        if not group.hits:
            continue
        items: list[SuggestionItem] = []
        for hit in group.hits:
            component = components.get(hit.component_id)
            if component is None:
                raise ComponentNotFoundInStoreException(
                    hit.component_id, group.qualifier
                )
            organization = organizations.get(component.organization_id)
            if organization is None:
                raise OrganizationNotFoundInStoreException(
                    component.organization_id, component.id
                )
            items.append(
                SuggestionItem(
                    organization=organization.key,
                    key=component.key,
                    name=component.name,
                    highlighted_text=hit.highlighted_text,
                )
            )
        groups.append(QualifierSuggestions(qualifier=group.qualifier, items=tuple(items)))
    return SuggestionsResult(results=tuple(groups))


class SuggestionsService:
    """Quick component suggestions grouped by qualifier (top-right search box)."""

    def __init__(
        self,
        component_index: IComponentIndex,
        component_store: IComponentStore,
    ) -> None:
        self.component_index = component_index
        self.component_store = component_store

    @traced("suggestions.aggregate")
    async def aggregate(self, query: str) -> SuggestionsResult:
        """Search the index and return enriched suggestions grouped by qualifier.

        Makes one index call and, when anything matched, exactly one
        component bulk read and one organization bulk read.

        Raises:
            InvalidQueryException: query shorter than MINIMUM_QUERY_LENGTH.
            DataInconsistencyException: index references an unknown component
                or a component references an unknown organization.
        """
        text = validate_query(query)
        hits_per_qualifier = await self.component_index.search(
            ComponentIndexQuery(
                query=text,
                qualifiers=SUGGESTION_QUALIFIERS,
                limit=RESULTS_PER_QUALIFIER,
            )
        )

        component_ids = {
            hit.component_id for group in hits_per_qualifier for hit in group.hits
        }
        add_span_attributes(
            query_length=len(text),
            qualifier_count=len(hits_per_qualifier),
            component_count=len(component_ids),
        )
        if not component_ids:
            logger.debug("No suggestions for query of length %d", len(text))
            return SuggestionsResult()

        # load all relevant components, then their organizations (one read each)
        components = await self.component_store.resolve_components(component_ids)
        organization_ids = {c.organization_id for c in components.values()}
        organizations = await self.component_store.resolve_organizations(
            organization_ids
        )

        logger.debug(
            "Resolved %d/%d components in %d organizations across %d qualifiers",
            len(components),
            len(component_ids),
            len(organizations),
            len(hits_per_qualifier),
        )
        return assemble_suggestions(hits_per_qualifier, components, organizations)
