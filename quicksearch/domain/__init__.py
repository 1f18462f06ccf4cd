"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from quicksearch.domain.enums import Qualifier
from quicksearch.domain.exceptions import (
    ComponentNotFoundInStoreException,
    DataInconsistencyException,
    InvalidQueryException,
    OrganizationNotFoundInStoreException,
    QuickSearchException,
    SqlNotConfiguredException,
    ValidationException,
)

__all__ = [
    # Enums
    "Qualifier",
    # Exceptions
    "ComponentNotFoundInStoreException",
    "DataInconsistencyException",
    "InvalidQueryException",
    "OrganizationNotFoundInStoreException",
    "QuickSearchException",
    "SqlNotConfiguredException",
    "ValidationException",
]
