"""Infrastructure adapters for the application ports (component index and store)."""

from quicksearch.infrastructure.services.component_index import SqlComponentIndex
from quicksearch.infrastructure.services.component_store import ComponentStore

__all__ = ["ComponentStore", "SqlComponentIndex"]
