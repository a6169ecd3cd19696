"""Error Taxonomy — one tagged error type for every application failure mode.

Invariants:
    - Every AppError carries an ErrorKind; http_status and code derive from it
    - _KIND_TABLE has an entry for every ErrorKind (checked by tests)
    - to_response() never includes store internals — only the user-facing message

Design Decisions:
    - Closed kind enum over subclass dispatch: the HTTP boundary decides status
      and code with one table lookup instead of isinstance chains
    - Subclasses only fix the kind and the message shape; nothing outside this
      module inspects their runtime type
"""

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Closed set of application error kinds."""
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    DATABASE = "database"


# kind -> (http_status, machine code)
_KIND_TABLE: dict[ErrorKind, tuple[int, str]] = {
    ErrorKind.VALIDATION: (400, "VALIDATION_ERROR"),
    ErrorKind.NOT_FOUND: (404, "NOT_FOUND"),
    ErrorKind.CONFLICT: (409, "CONFLICT"),
    ErrorKind.DATABASE: (500, "DATABASE_ERROR"),
}


def status_and_code(kind: ErrorKind) -> tuple[int, str]:
    """Resolve the HTTP status and machine code for an error kind."""
    return _KIND_TABLE[kind]


class AppError(Exception):
    """Base (and only) exception type for recognised application errors."""

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        details: list[dict[str, str]] | None = None,
        operation: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.details = details
        self.operation = operation

    @property
    def http_status(self) -> int:
        return status_and_code(self.kind)[0]

    @property
    def code(self) -> str:
        return status_and_code(self.kind)[1]

    def to_response(self) -> dict[str, Any]:
        """Convert to the REST error envelope."""
        body: dict[str, Any] = {"error": self.code, "message": self.message}
        if self.details:
            body["details"] = self.details
        return body

    def __repr__(self) -> str:
        return f"AppError(kind={self.kind.value!r}, message={self.message!r})"


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationError(AppError):
    """Client-fixable input problem."""
    def __init__(self, message: str, details: list[dict[str, str]] | None = None):
        super().__init__(message, ErrorKind.VALIDATION, details=details)


class NotFoundError(AppError):
    """Referenced resource does not exist."""
    def __init__(self, resource: str, resource_id: str):
        super().__init__(
            f"{resource} with id '{resource_id}' not found", ErrorKind.NOT_FOUND,
        )
        self.resource = resource
        self.resource_id = resource_id


class ConflictError(AppError):
    """Resource already exists or state conflicts."""
    def __init__(self, message: str):
        super().__init__(message, ErrorKind.CONFLICT)


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(AppError):
    """Store failure — message is user-facing, the cause stays in __cause__."""
    def __init__(self, message: str, operation: str = "unknown"):
        super().__init__(message, ErrorKind.DATABASE, operation=operation)
