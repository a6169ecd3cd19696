"""Error Taxonomy — verifies kind → (status, code) mapping and response shape.

Tests:
    - Every ErrorKind has a table entry
    - Subclasses carry the expected kind and message
    - to_response() includes details only when present
"""

import pytest

from customer_health.core.errors import (
    AppError, ConflictError, DatabaseError, ErrorKind, NotFoundError,
    ValidationError, status_and_code,
)


def test_every_kind_has_status_and_code():
    for kind in ErrorKind:
        status, code = status_and_code(kind)
        assert 400 <= status < 600
        assert code


@pytest.mark.parametrize("exc,status,code", [
    (ValidationError("bad"), 400, "VALIDATION_ERROR"),
    (NotFoundError("Checklist", "abc"), 404, "NOT_FOUND"),
    (ConflictError("dup"), 409, "CONFLICT"),
    (DatabaseError("boom"), 500, "DATABASE_ERROR"),
])
def test_subclass_status_and_code(exc, status, code):
    assert exc.http_status == status
    assert exc.code == code


def test_not_found_message_names_resource_and_id():
    exc = NotFoundError("Checklist", "abc-123")
    assert exc.message == "Checklist with id 'abc-123' not found"
    assert exc.resource_id == "abc-123"


def test_to_response_without_details():
    assert DatabaseError("Failed to list checklists").to_response() == {
        "error": "DATABASE_ERROR",
        "message": "Failed to list checklists",
    }


def test_to_response_with_details():
    exc = ValidationError("bad", details=[{"path": "score", "message": "too big"}])
    assert exc.to_response()["details"] == [{"path": "score", "message": "too big"}]


def test_database_error_keeps_operation():
    assert DatabaseError("x", "commit").operation == "commit"
    assert DatabaseError("x").operation == "unknown"


def test_app_error_is_exception():
    with pytest.raises(AppError):
        raise ConflictError("dup")
