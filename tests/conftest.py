"""Pytest configuration and fixtures for quicksearch.

Uses quicksearch.main:app for HTTP tests. Suggestions collaborators are
replaced with AsyncMock doubles through app.dependency_overrides; DB-backed
integration tests use the real session factory and skip when Postgres is not
configured.
"""

from collections.abc import AsyncIterator, Iterator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from unittest.mock import AsyncMock

from quicksearch.api.v1.dependencies import get_suggestions_service
from quicksearch.application.dtos.component import ComponentResult, OrganizationResult
from quicksearch.application.dtos.suggestion import (
    ComponentHit,
    ComponentHitsPerQualifier,
)
from quicksearch.application.use_cases.suggestions import SuggestionsService
from quicksearch.core.config import get_settings
from quicksearch.infrastructure.persistence import database
from quicksearch.main import app


def make_component(
    component_id: str,
    key: str | None = None,
    name: str | None = None,
    organization_id: str = "org-100",
    qualifier: str = "TRK",
) -> ComponentResult:
    """ComponentResult with defaults derived from the id."""
    return ComponentResult(
        id=component_id,
        organization_id=organization_id,
        key=key or f"key-{component_id}",
        name=name or f"Name {component_id}",
        qualifier=qualifier,
    )


def make_organization(organization_id: str = "org-100", key: str = "my-org") -> OrganizationResult:
    return OrganizationResult(id=organization_id, key=key, name=key)


def hits(qualifier: str, *component_ids: str) -> ComponentHitsPerQualifier:
    """Hit group without highlights, in the given rank order."""
    return ComponentHitsPerQualifier(
        qualifier=qualifier,
        hits=tuple(ComponentHit(component_id=cid) for cid in component_ids),
    )


@pytest.fixture
def component_index() -> AsyncMock:
    """Index double; search returns no hits unless a test sets return_value."""
    index = AsyncMock()
    index.search = AsyncMock(return_value=[])
    return index


@pytest.fixture
def component_store() -> AsyncMock:
    """Store double resolving nothing unless a test sets return values."""
    store = AsyncMock()
    store.resolve_components = AsyncMock(return_value={})
    store.resolve_organizations = AsyncMock(return_value={})
    return store


@pytest.fixture
def suggestions_service(
    component_index: AsyncMock, component_store: AsyncMock
) -> SuggestionsService:
    return SuggestionsService(component_index, component_store)


@pytest.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def override_suggestions_service(
    suggestions_service: SuggestionsService,
) -> Iterator[SuggestionsService]:
    """Route the suggestions endpoint to the service built on the mock collaborators."""
    app.dependency_overrides[get_suggestions_service] = lambda: suggestions_service
    yield suggestions_service
    app.dependency_overrides.pop(get_suggestions_service, None)


@pytest.fixture
def no_database(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Run the test with DATABASE_URL unset and no engine created."""
    monkeypatch.setenv("DATABASE_URL", "")
    monkeypatch.setattr(database, "AsyncSessionLocal", None)
    monkeypatch.setattr(database, "engine", None)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
async def session_factory() -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    """Real session factory for integration tests. Skips when Postgres is not configured.

    The engine is disposed after each test so pooled connections never outlive
    the test's event loop. Use @pytest.mark.requires_db on tests that need it;
    run without DB via: pytest -m 'not requires_db'.
    """
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        pytest.skip(
            "Postgres not configured: set DATABASE_URL, "
            "then run: uv run alembic upgrade head"
        )
    yield database.AsyncSessionLocal
    await database.dispose_engine()
