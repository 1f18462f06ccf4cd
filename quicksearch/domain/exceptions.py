"""Domain exceptions for quicksearch.

Defines domain-level exceptions for invalid input and for disagreement
between the component index and the component store. They are independent
of infrastructure concerns; the presentation layer maps them to HTTP
responses in exception handlers. Store and driver failures are not wrapped
and propagate unchanged.
"""

from typing import Any


class QuickSearchException(Exception):
    """Base exception for all quicksearch application errors.

    Presentation layer maps these to HTTP responses using message,
    error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, component_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body: error, message, details."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(QuickSearchException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or parameter that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class InvalidQueryException(ValidationException):
    """Raised when a suggestions query is shorter than the minimum length."""

    def __init__(self, query: str, minimum_length: int) -> None:
        """Initialize with the rejected query and the minimum length.

        Args:
            query: The query as received.
            minimum_length: Minimum number of non-blank characters.
        """
        super().__init__(
            f"Query must be at least {minimum_length} characters",
            field="s",
        )
        self.details["minimum_length"] = minimum_length
        self.query = query


class DataInconsistencyException(QuickSearchException):
    """Raised when the component index references data the store does not have.

    Not retryable: it signals drift between index and database that has to be
    repaired (e.g. by reindexing), so the whole request fails instead of
    dropping the result.
    """

    def __init__(self, message: str, details: dict[str, Any]) -> None:
        super().__init__(message, "DATA_INCONSISTENCY", details)


class ComponentNotFoundInStoreException(DataInconsistencyException):
    """Raised when a component id returned by the index is missing from the store."""

    def __init__(self, component_id: str, qualifier: str) -> None:
        """Initialize with the missing component id and its index qualifier.

        Args:
            component_id: Component id found in the index.
            qualifier: Qualifier group the id was returned in.
        """
        super().__init__(
            f"Component with id '{component_id}' found in index, but not found in database",
            {"component_id": component_id, "qualifier": qualifier},
        )


class OrganizationNotFoundInStoreException(DataInconsistencyException):
    """Raised when a component's organization is missing from the store."""

    def __init__(self, organization_id: str, component_id: str) -> None:
        """Initialize with the missing organization id and the referencing component.

        Args:
            organization_id: Organization id stored on the component.
            component_id: Component that references the organization.
        """
        super().__init__(
            f"Organization with id '{organization_id}' not found",
            {"organization_id": organization_id, "component_id": component_id},
        )


class SqlNotConfiguredException(QuickSearchException):
    """Raised when an operation requires Postgres but DATABASE_URL is not set."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
