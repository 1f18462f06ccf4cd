"""ORM models. Import here so Base.metadata sees every table."""

from quicksearch.infrastructure.persistence.models.component import Component
from quicksearch.infrastructure.persistence.models.organization import Organization

__all__ = ["Component", "Organization"]
