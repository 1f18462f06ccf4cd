"""Application ports (protocols) implemented by infrastructure."""

from quicksearch.application.interfaces.repositories import (
    IComponentIndex,
    IComponentStore,
)

__all__ = ["IComponentIndex", "IComponentStore"]
