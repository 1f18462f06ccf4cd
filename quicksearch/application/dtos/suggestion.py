"""DTOs for component suggestions: index hits in, grouped items out."""

from dataclasses import dataclass, field

from quicksearch.domain.enums import Qualifier


@dataclass(frozen=True)
class ComponentIndexQuery:
    """Query sent to the component index: text, allowed qualifiers, limit per qualifier."""

    query: str
    qualifiers: tuple[Qualifier, ...]
    limit: int


@dataclass(frozen=True)
class ComponentHit:
    """Single ranked index match. highlighted_text is opaque markup from the index."""

    component_id: str
    highlighted_text: str | None = None


@dataclass(frozen=True)
class ComponentHitsPerQualifier:
    """Ranked hits of one qualifier, best match first."""

    qualifier: str
    hits: tuple[ComponentHit, ...]


@dataclass(frozen=True)
class SuggestionItem:
    """Enriched suggestion: organization key, component key and name, optional highlight."""

    organization: str
    key: str
    name: str
    highlighted_text: str | None = None


@dataclass(frozen=True)
class QualifierSuggestions:
    """Suggestions of one qualifier, in index rank order (never empty)."""

    qualifier: str
    items: tuple[SuggestionItem, ...]


@dataclass(frozen=True)
class SuggestionsResult:
    """Grouped suggestions in index qualifier order; empty when nothing matched."""

    results: tuple[QualifierSuggestions, ...] = field(default_factory=tuple)
