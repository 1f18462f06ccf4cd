"""Tests for domain exceptions (error_code, message, details)."""

import pytest

from quicksearch.domain.exceptions import (
    ComponentNotFoundInStoreException,
    DataInconsistencyException,
    InvalidQueryException,
    OrganizationNotFoundInStoreException,
    QuickSearchException,
    SqlNotConfiguredException,
    ValidationException,
)


def test_quicksearch_exception_default_error_code() -> None:
    """Base QuickSearchException uses class name as error_code when not provided."""
    exc = QuickSearchException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "QuickSearchException"
    assert exc.details == {}


def test_to_dict() -> None:
    exc = QuickSearchException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {
        "error": "CUSTOM",
        "message": "Oops",
        "details": {"key": "value"},
    }


def test_validation_exception_without_field() -> None:
    exc = ValidationException("Invalid")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {}


def test_invalid_query_exception() -> None:
    """InvalidQueryException is a validation error on parameter s."""
    exc = InvalidQueryException(" x ", 2)
    assert isinstance(exc, ValidationException)
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "s", "minimum_length": 2}
    assert exc.query == " x "
    assert "2" in exc.message


def test_component_not_found_in_store() -> None:
    exc = ComponentNotFoundInStoreException("c-1", "FIL")
    assert isinstance(exc, DataInconsistencyException)
    assert exc.error_code == "DATA_INCONSISTENCY"
    assert exc.message == "Component with id 'c-1' found in index, but not found in database"
    assert exc.details == {"component_id": "c-1", "qualifier": "FIL"}


def test_organization_not_found_in_store() -> None:
    exc = OrganizationNotFoundInStoreException("org-9", "c-1")
    assert exc.error_code == "DATA_INCONSISTENCY"
    assert exc.message == "Organization with id 'org-9' not found"
    assert exc.details == {"organization_id": "org-9", "component_id": "c-1"}


def test_sql_not_configured() -> None:
    exc = SqlNotConfiguredException()
    assert exc.error_code == "SERVICE_UNAVAILABLE"
    assert "not configured" in exc.message


@pytest.mark.parametrize(
    "exc",
    [
        InvalidQueryException("x", 2),
        ComponentNotFoundInStoreException("c", "TRK"),
        OrganizationNotFoundInStoreException("o", "c"),
        SqlNotConfiguredException(),
    ],
)
def test_all_domain_exceptions_inherit_base(exc: QuickSearchException) -> None:
    assert isinstance(exc, QuickSearchException)
    assert str(exc) == exc.message
