"""Error Hierarchy — typed, closed set of failure kinds for the catalog API.

Invariants:
    - Every error has a kind (ErrorKind) and an HTTP status derived from it
    - ErrorKind is closed: VALIDATION, NOT_FOUND, OPERATION_FAILED, UNEXPECTED
    - to_response() always produces the {"message": str} envelope

Design Decisions:
    - Single hierarchy with CatalogError base: one FastAPI handler translates all
      (ADR: uniform error shape, no per-route try/except)
    - Status lives on the kind, not the subclass: the boundary never guesses
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Failure classes, by effect rather than by cause."""
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    OPERATION_FAILED = "operation_failed"
    UNEXPECTED = "unexpected"

    @property
    def http_status(self) -> int:
        return _HTTP_STATUS[self]


_HTTP_STATUS = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.OPERATION_FAILED: 500,
    ErrorKind.UNEXPECTED: 500,
}

FALLBACK_MESSAGE = "An unexpected error occurred"


class CatalogError(Exception):
    """Base exception for all catalog errors."""

    def __init__(self, message: str, kind: ErrorKind):
        super().__init__(message)
        self.message = message
        self.kind = kind

    @property
    def http_status(self) -> int:
        return self.kind.http_status

    @property
    def code(self) -> str:
        return self.kind.value.upper()

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {"message": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class PayloadValidationError(CatalogError):
    """Request body violated the resource schema."""
    def __init__(self, message: str, field: str | None = None):
        super().__init__(message, ErrorKind.VALIDATION)
        self.field = field


class ResourceNotFoundError(CatalogError):
    """No document matched the identifier."""
    def __init__(self, resource_name: str, resource_id: str | None = None):
        super().__init__(f"{resource_name} not found", ErrorKind.NOT_FOUND)
        self.resource_name = resource_name
        self.resource_id = resource_id


# ─── Server Errors (500-level) ──────────────────────────────────

class OperationFailedError(CatalogError):
    """Database accepted the call but reported it had no effect."""
    def __init__(self, message: str):
        super().__init__(message, ErrorKind.OPERATION_FAILED)


class UnexpectedError(CatalogError):
    """Anything raised below the handler layer.

    detail keeps the underlying error text; empty means message is a fallback.
    """
    def __init__(self, message: str | None = None, fallback: str = FALLBACK_MESSAGE):
        super().__init__(message or fallback, ErrorKind.UNEXPECTED)
        self.detail = message or ""


class DatabaseError(UnexpectedError):
    """Driver-level failure (malformed id, connection loss, server error)."""
    def __init__(self, message: str, operation: str):
        super().__init__(message)
        self.operation = operation
