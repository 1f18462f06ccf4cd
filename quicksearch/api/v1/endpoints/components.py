"""Components API: quick suggestions for the top-right search box."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from quicksearch.api.v1.dependencies import get_suggestions_service
from quicksearch.application.use_cases.suggestions import SuggestionsService
from quicksearch.core.constants import MINIMUM_QUERY_LENGTH, RESULTS_PER_QUALIFIER
from quicksearch.core.limiter import limit_suggestions
from quicksearch.schemas.suggestion import SuggestionsResponse

router = APIRouter()

_SUGGESTIONS_DESCRIPTION = (
    "Internal endpoint for the top-right search engine. The result contains "
    "component search results, grouped by their qualifiers, at most "
    f"{RESULTS_PER_QUALIFIER} per qualifier.<p>Each result contains:<ul>"
    "<li>the organization key</li>"
    "<li>the component key</li>"
    "<li>the component's name (unescaped)</li>"
    "<li>optionally a highlighted text, which puts emphasis on matching characters "
    "(this text contains html tags and parts of the html-escaped name)</li>"
    "</ul>"
)


@router.get(
    "/suggestions",
    response_model=SuggestionsResponse,
    response_model_exclude_none=True,
    summary="Component suggestions grouped by qualifier",
    description=_SUGGESTIONS_DESCRIPTION,
    responses={
        400: {"description": f"Query shorter than {MINIMUM_QUERY_LENGTH} characters"},
        500: {"description": "Index and database disagree (DATA_INCONSISTENCY)"},
        503: {"description": "Database not configured"},
    },
)
@limit_suggestions
async def suggestions(
    request: Request,
    suggestions_svc: Annotated[SuggestionsService, Depends(get_suggestions_service)],
    s: str = Query(
        ...,
        max_length=500,
        description=f"Substring of project key (minimum {MINIMUM_QUERY_LENGTH} characters)",
        examples=["sonar"],
    ),
) -> SuggestionsResponse:
    """Return component suggestions for query s."""
    result = await suggestions_svc.aggregate(s)
    return SuggestionsResponse.from_result(result)
