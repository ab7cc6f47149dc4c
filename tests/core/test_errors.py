"""Error Hierarchy tests - not-found error shape, text and envelope."""

from roster.core.errors import (
    ErrorCategory, ErrorSeverity, ResourceNotFoundError, RosterError,
    internal_error_response,
)


def test_not_found_is_roster_error_with_404():
    err = ResourceNotFoundError("User", "42")
    assert isinstance(err, RosterError)
    assert err.http_status == 404
    assert err.code == "RESOURCE_NOT_FOUND"
    assert err.category == ErrorCategory.RESOURCE_NOT_FOUND
    assert err.message == "User '42' not found"


def test_not_found_text_omits_the_id():
    assert ResourceNotFoundError("User", "42").to_text() == "User not found"


def test_to_response_envelope():
    body = ResourceNotFoundError("User", "7").to_response()
    error = body["error"]
    assert error["code"] == "RESOURCE_NOT_FOUND"
    assert error["category"] == "resource_not_found"
    assert error["severity"] == ErrorSeverity.ERROR.value
    assert error["context"]["resource_id"] == "7"
    assert "timestamp" in error


def test_internal_error_envelope_is_critical():
    error = internal_error_response()["error"]
    assert error["code"] == "INTERNAL_ERROR"
    assert error["severity"] == ErrorSeverity.CRITICAL.value
