"""ComponentStore and SqlComponentIndex against Postgres.

Each test seeds its own organization and components with unique keys, commits
(the adapters open their own sessions) and deletes the organization afterwards.
"""

import uuid

import pytest
from sqlalchemy import delete

from quicksearch.application.dtos.suggestion import ComponentIndexQuery
from quicksearch.application.use_cases.suggestions import SuggestionsService
from quicksearch.core.constants import RESULTS_PER_QUALIFIER, SUGGESTION_QUALIFIERS
from quicksearch.domain.enums import Qualifier
from quicksearch.infrastructure.persistence.models import Organization
from quicksearch.infrastructure.persistence.repositories import (
    ComponentRepository,
    OrganizationRepository,
)
from quicksearch.infrastructure.services import ComponentStore, SqlComponentIndex


@pytest.fixture
async def seeded(session_factory):
    """Organization with a project, files and a disabled project; token is unique per test."""
    token = uuid.uuid4().hex[:12]
    async with session_factory() as session:
        org = await OrganizationRepository(session).create_organization(
            key=f"org-{token}", name="Integration Org"
        )
        repo = ComponentRepository(session)
        project = await repo.create_component(
            org.id, f"{token}:proj", f"Proj{token}", Qualifier.PROJECT
        )
        files = [
            await repo.create_component(
                org.id,
                f"{token}:proj:File{i}.xoo",
                f"File{i}{token}.xoo",
                Qualifier.FILE,
                long_name=f"src/File{i}{token}.xoo",
            )
            for i in range(8)
        ]
        await repo.create_component(
            org.id, f"{token}:old", f"Old{token}", Qualifier.PROJECT, enabled=False
        )
        await session.commit()
    yield {"token": token, "organization": org, "project": project, "files": files}
    async with session_factory() as session:
        await session.execute(delete(Organization).where(Organization.id == org.id))
        await session.commit()


@pytest.mark.requires_db
async def test_resolve_components_and_organizations(session_factory, seeded) -> None:
    store = ComponentStore(session_factory)
    project = seeded["project"]

    components = await store.resolve_components({project.id, "missing-id"})
    organizations = await store.resolve_organizations({project.organization_id})

    assert set(components) == {project.id}
    assert components[project.id].key == project.key
    assert organizations[project.organization_id].key == seeded["organization"].key


@pytest.mark.requires_db
async def test_index_limits_hits_per_qualifier_and_skips_disabled(session_factory, seeded) -> None:
    index = SqlComponentIndex(session_factory)

    groups = await index.search(
        ComponentIndexQuery(
            query=seeded["token"],
            qualifiers=SUGGESTION_QUALIFIERS,
            limit=RESULTS_PER_QUALIFIER,
        )
    )

    by_qualifier = {g.qualifier: g.hits for g in groups}
    assert [g.qualifier for g in groups] == ["TRK", "FIL"]
    assert [h.component_id for h in by_qualifier["TRK"]] == [seeded["project"].id]
    assert len(by_qualifier["FIL"]) == RESULTS_PER_QUALIFIER


@pytest.mark.requires_db
async def test_aggregate_end_to_end(session_factory, seeded) -> None:
    service = SuggestionsService(
        SqlComponentIndex(session_factory), ComponentStore(session_factory)
    )

    result = await service.aggregate(f"Proj{seeded['token']}")

    assert len(result.results) == 1
    group = result.results[0]
    assert group.qualifier == "TRK"
    item = group.items[0]
    assert item.organization == seeded["organization"].key
    assert item.key == seeded["project"].key
    assert item.highlighted_text == f"<mark>Proj{seeded['token']}</mark>"


@pytest.fixture
async def ranked_projects(session_factory):
    """Projects whose names all contain sonar<token> and compete on rank.

    Returns (query, ids by label). Labels: exact, prefix_short, prefix_long,
    tie_a and tie_b (same name, keys decide), contains_my, contains_x.
    """
    token = uuid.uuid4().hex[:12]
    query = f"sonar{token}"
    names = {
        "contains_x": f"x{query}x",
        "contains_my": f"my{query}",
        "prefix_long": f"{query}App",
        "tie_b": f"ab{query}",
        "exact": query,
        "tie_a": f"ab{query}",
        "prefix_short": f"{query}Z",
    }
    keys = {label: f"{token}:{label}" for label in names}
    async with session_factory() as session:
        org = await OrganizationRepository(session).create_organization(
            key=f"org-{token}", name="Ranking Org"
        )
        repo = ComponentRepository(session)
        ids = {}
        for label, name in names.items():
            created = await repo.create_component(org.id, keys[label], name, Qualifier.PROJECT)
            ids[label] = created.id
        await session.commit()
    yield query, ids
    async with session_factory() as session:
        await session.execute(delete(Organization).where(Organization.id == org.id))
        await session.commit()


@pytest.mark.requires_db
async def test_index_ranks_exact_then_prefix_then_length_then_name_then_key(
    session_factory, ranked_projects
) -> None:
    """Exact match first, then name prefixes, then other matches; ties by length, name, key."""
    query, ids = ranked_projects
    index = SqlComponentIndex(session_factory)

    groups = await index.search(
        ComponentIndexQuery(
            query=query, qualifiers=SUGGESTION_QUALIFIERS, limit=RESULTS_PER_QUALIFIER
        )
    )

    assert [g.qualifier for g in groups] == ["TRK"]
    assert [h.component_id for h in groups[0].hits] == [
        ids["exact"],
        ids["prefix_short"],
        ids["prefix_long"],
        ids["tie_a"],
        ids["tie_b"],
        ids["contains_my"],
    ]
    # seventh match falls outside the per-qualifier limit
    assert ids["contains_x"] not in {h.component_id for h in groups[0].hits}


@pytest.mark.requires_db
async def test_index_exact_key_match_ranks_first(session_factory, ranked_projects) -> None:
    """A component whose key equals the query outranks name prefixes."""
    query, ids = ranked_projects
    token = query.removeprefix("sonar")
    async with session_factory() as session:
        repo = ComponentRepository(session)
        exact = await repo.get_by_key(f"{token}:exact")
        by_key = await repo.create_component(
            exact.organization_id, query, f"Project {token}", Qualifier.PROJECT
        )
        await session.commit()

    groups = await SqlComponentIndex(session_factory).search(
        ComponentIndexQuery(query=query, qualifiers=[Qualifier.PROJECT], limit=2)
    )

    # exact name and exact key tie on relevance; the shorter name wins
    assert [h.component_id for h in groups[0].hits] == [ids["exact"], by_key.id]
