"""DTOs for components and organizations (no dependency on ORM)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class OrganizationResult:
    """Organization read-model (result of bulk resolution by id)."""

    id: str
    key: str
    name: str


@dataclass(frozen=True)
class ComponentResult:
    """Component read-model (result of bulk resolution by id)."""

    id: str
    organization_id: str
    key: str
    name: str  # long name when the component has one, else short name
    qualifier: str
