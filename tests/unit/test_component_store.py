"""ComponentStore and SqlComponentIndex unit tests: one scoped session per bulk call."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from quicksearch.application.dtos.component import ComponentResult, OrganizationResult
from quicksearch.application.dtos.suggestion import ComponentIndexQuery
from quicksearch.core.constants import RESULTS_PER_QUALIFIER, SUGGESTION_QUALIFIERS
from quicksearch.infrastructure.persistence.models import Component, Organization
from quicksearch.infrastructure.services import ComponentStore, SqlComponentIndex


class FakeSessionFactory:
    """Session factory double that counts opened and closed sessions."""

    def __init__(self, scalars: list | None = None, error: Exception | None = None) -> None:
        self.opened = 0
        self.closed = 0
        self.session = MagicMock()
        if error is not None:
            self.session.execute = AsyncMock(side_effect=error)
        else:
            result = MagicMock()
            result.scalars.return_value.all.return_value = scalars or []
            result.mappings.return_value.all.return_value = []
            self.session.execute = AsyncMock(return_value=result)

    def __call__(self) -> "FakeSessionFactory":
        return self

    async def __aenter__(self) -> MagicMock:
        self.opened += 1
        return self.session

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.closed += 1


async def test_resolve_components_maps_by_id_with_display_name() -> None:
    factory = FakeSessionFactory(
        scalars=[
            Component(id="c1", organization_id="o1", key="k1", name="App.xoo", long_name="src/App.xoo", qualifier="FIL"),
            Component(id="c2", organization_id="o1", key="k2", name="Sonar", long_name=None, qualifier="TRK"),
        ]
    )
    store = ComponentStore(factory)

    components = await store.resolve_components({"c1", "c2", "c3"})

    assert components == {
        "c1": ComponentResult(id="c1", organization_id="o1", key="k1", name="src/App.xoo", qualifier="FIL"),
        "c2": ComponentResult(id="c2", organization_id="o1", key="k2", name="Sonar", qualifier="TRK"),
    }
    assert factory.opened == factory.closed == 1
    factory.session.execute.assert_awaited_once()


async def test_resolve_organizations_maps_by_id() -> None:
    factory = FakeSessionFactory(scalars=[Organization(id="o1", key="my-org", name="My Org")])
    store = ComponentStore(factory)

    organizations = await store.resolve_organizations({"o1"})

    assert organizations == {"o1": OrganizationResult(id="o1", key="my-org", name="My Org")}
    assert factory.opened == factory.closed == 1


async def test_empty_id_set_opens_no_session() -> None:
    factory = FakeSessionFactory()
    store = ComponentStore(factory)

    assert await store.resolve_components(set()) == {}
    assert await store.resolve_organizations(set()) == {}
    assert factory.opened == 0


async def test_session_released_when_read_fails() -> None:
    factory = FakeSessionFactory(error=OSError("connection reset"))
    store = ComponentStore(factory)

    with pytest.raises(OSError, match="connection reset"):
        await store.resolve_components({"c1"})

    assert factory.opened == factory.closed == 1


async def test_index_search_uses_one_session() -> None:
    factory = FakeSessionFactory()
    index = SqlComponentIndex(factory)

    groups = await index.search(
        ComponentIndexQuery(
            query="sonar",
            qualifiers=SUGGESTION_QUALIFIERS,
            limit=RESULTS_PER_QUALIFIER,
        )
    )

    assert groups == []
    assert factory.opened == factory.closed == 1
