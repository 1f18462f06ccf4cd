"""Application DTOs: read-models passed between use cases and ports."""

from quicksearch.application.dtos.component import ComponentResult, OrganizationResult
from quicksearch.application.dtos.suggestion import (
    ComponentHit,
    ComponentHitsPerQualifier,
    ComponentIndexQuery,
    QualifierSuggestions,
    SuggestionItem,
    SuggestionsResult,
)

__all__ = [
    "ComponentHit",
    "ComponentHitsPerQualifier",
    "ComponentIndexQuery",
    "ComponentResult",
    "OrganizationResult",
    "QualifierSuggestions",
    "SuggestionItem",
    "SuggestionsResult",
]
