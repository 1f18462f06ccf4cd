"""Component suggestions API schemas."""

from pydantic import BaseModel, ConfigDict, Field

from quicksearch.application.dtos.suggestion import SuggestionsResult


class SuggestionItemResponse(BaseModel):
    """Single suggested component."""

    organization: str = Field(..., description="Key of the component's organization")
    key: str = Field(..., description="Component key")
    name: str = Field(..., description="Component name (unescaped)")
    highlighted_text: str | None = Field(
        default=None,
        description=(
            "Name with matching characters wrapped in <mark> tags; contains HTML "
            "and parts of the HTML-escaped name. Omitted when the name did not match."
        ),
    )


class QualifierSuggestionsResponse(BaseModel):
    """Suggestions of one qualifier, best match first."""

    q: str = Field(..., description="Qualifier (VW, SVW, TRK, BRC, FIL, UTS)")
    items: list[SuggestionItemResponse]


class SuggestionsResponse(BaseModel):
    """Suggestions grouped by qualifier. Qualifiers without matches are omitted."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "results": [
                    {
                        "q": "TRK",
                        "items": [
                            {
                                "organization": "my-org",
                                "key": "com.example:search-box",
                                "name": "Search Box",
                                "highlighted_text": "<mark>Search</mark> Box",
                            }
                        ],
                    },
                    {
                        "q": "FIL",
                        "items": [
                            {
                                "organization": "my-org",
                                "key": "com.example:search-box:src/SearchRunner.java",
                                "name": "src/SearchRunner.java",
                                "highlighted_text": "<mark>Search</mark>Runner.java",
                            }
                        ],
                    },
                ]
            }
        }
    )

    results: list[QualifierSuggestionsResponse]

    @classmethod
    def from_result(cls, result: SuggestionsResult) -> "SuggestionsResponse":
        """Build the response from the use case result (order preserved)."""
        return cls(
            results=[
                QualifierSuggestionsResponse(
                    q=group.qualifier,
                    items=[
                        SuggestionItemResponse(
                            organization=item.organization,
                            key=item.key,
                            name=item.name,
                            highlighted_text=item.highlighted_text,
                        )
                        for item in group.items
                    ],
                )
                for group in result.results
            ]
        )
