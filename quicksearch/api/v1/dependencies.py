"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the suggestions use case. Infrastructure
adapters are built here; routes depend only on these dependencies. Tests
swap them through app.dependency_overrides.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from quicksearch.application.use_cases.suggestions import SuggestionsService
from quicksearch.infrastructure.persistence.database import get_session_factory
from quicksearch.infrastructure.services import ComponentStore, SqlComponentIndex


def get_component_index(
    session_factory: Annotated[
        async_sessionmaker[AsyncSession], Depends(get_session_factory)
    ],
) -> SqlComponentIndex:
    """Component index (PostgreSQL search, one session per search)."""
    return SqlComponentIndex(session_factory)


def get_component_store(
    session_factory: Annotated[
        async_sessionmaker[AsyncSession], Depends(get_session_factory)
    ],
) -> ComponentStore:
    """Component store (bulk reads, one session per read)."""
    return ComponentStore(session_factory)


def get_suggestions_service(
    component_index: Annotated[SqlComponentIndex, Depends(get_component_index)],
    component_store: Annotated[ComponentStore, Depends(get_component_store)],
) -> SuggestionsService:
    """Suggestions use case (index search + bulk resolution)."""
    return SuggestionsService(component_index, component_store)
