"""Seed organizations and components from scripts/seed-data.json into Postgres.

Organizations are looked up by key and created if missing; components are
created under their organization unless a component with the same key exists.

Usage:
    uv run python -m scripts.seed_dev_data [path/to/seed-data.json]

Default path: scripts/seed-data.json (relative to project root).
Requires: DATABASE_URL (Postgres) and a migrated DB (uv run alembic upgrade head).
"""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path

from dotenv import load_dotenv

from quicksearch.core.config import get_settings
from quicksearch.domain.enums import Qualifier
from quicksearch.domain.exceptions import SqlNotConfiguredException
from quicksearch.infrastructure.persistence.database import (
    dispose_engine,
    get_session_factory,
)
from quicksearch.infrastructure.persistence.repositories import (
    ComponentRepository,
    OrganizationRepository,
)


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_URL when run as script."""
    load_dotenv(_project_root() / ".env", override=True)
    get_settings.cache_clear()


async def run(path: Path) -> None:
    _load_env()
    if not path.exists():
        print(f"Seed file not found: {path}", file=sys.stderr)
        sys.exit(1)
    with path.open() as f:
        data = json.load(f)

    try:
        session_factory = get_session_factory()
    except SqlNotConfiguredException:
        print(
            "Database not configured. Set DATABASE_URL and run: uv run alembic upgrade head",
            file=sys.stderr,
        )
        sys.exit(1)

    async with session_factory() as session:
        async with session.begin():
            organization_repo = OrganizationRepository(session)
            component_repo = ComponentRepository(session)
            for org in data.get("organizations", []):
                organization = await organization_repo.get_by_key(org["key"])
                if organization is None:
                    organization = await organization_repo.create_organization(
                        key=org["key"], name=org.get("name", org["key"])
                    )
                print(f"Organization {organization.key} -> {organization.id}")
                for comp in org.get("components", []):
                    if await component_repo.get_by_key(comp["key"]) is not None:
                        print(f"  Component {comp['key']} already exists, skip")
                        continue
                    created = await component_repo.create_component(
                        organization_id=organization.id,
                        key=comp["key"],
                        name=comp["name"],
                        qualifier=Qualifier(comp["qualifier"]),
                        long_name=comp.get("long_name"),
                        path=comp.get("path"),
                        enabled=comp.get("enabled", True),
                    )
                    print(f"  Component {created.key} ({created.qualifier}) -> {created.id}")

    await dispose_engine()
    print("Seed completed.")


def main() -> None:
    root = _project_root()
    path_arg = sys.argv[1] if len(sys.argv) > 1 else None
    path = Path(path_arg) if path_arg else root / "scripts" / "seed-data.json"
    if not path.is_absolute():
        path = (root / path).resolve()
    asyncio.run(run(path))


if __name__ == "__main__":
    main()
