"""API request/response schemas (pydantic)."""

from quicksearch.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)
from quicksearch.schemas.suggestion import (
    QualifierSuggestionsResponse,
    SuggestionItemResponse,
    SuggestionsResponse,
)

__all__ = [
    "HealthResponse",
    "QualifierSuggestionsResponse",
    "ReadinessErrorResponse",
    "ReadinessResponse",
    "SuggestionItemResponse",
    "SuggestionsResponse",
]
