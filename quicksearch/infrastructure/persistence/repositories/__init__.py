"""SQLAlchemy repositories. Each works on a session supplied by the caller."""

from quicksearch.infrastructure.persistence.repositories.base import BaseRepository
from quicksearch.infrastructure.persistence.repositories.component_repo import (
    ComponentRepository,
)
from quicksearch.infrastructure.persistence.repositories.component_search_repo import (
    ComponentSearchRepository,
)
from quicksearch.infrastructure.persistence.repositories.organization_repo import (
    OrganizationRepository,
)

__all__ = [
    "BaseRepository",
    "ComponentRepository",
    "ComponentSearchRepository",
    "OrganizationRepository",
]
