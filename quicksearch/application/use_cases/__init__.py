"""Application use cases."""

from quicksearch.application.use_cases.suggestions import (
    SuggestionsService,
    assemble_suggestions,
    validate_query,
)

__all__ = ["SuggestionsService", "assemble_suggestions", "validate_query"]
