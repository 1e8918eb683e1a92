"""Error taxonomy shared by data access, the query cache and the HTTP layer."""

from enum import Enum


class ErrorKind(Enum):
    """Classification of failures surfaced to callers."""

    NOT_AUTHENTICATED = "not_authenticated"
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    BACKEND = "backend"


class ChefNextDoorError(Exception):
    """Base class for all normalized application errors."""

    kind: ErrorKind = ErrorKind.BACKEND


class NotAuthenticatedError(ChefNextDoorError):
    """Raised when an operation needs a session and none is present."""

    kind = ErrorKind.NOT_AUTHENTICATED

    def __init__(self, message: str = "User not authenticated") -> None:
        super().__init__(message)


class NotFoundError(ChefNextDoorError):
    """Raised when a row is absent or the ownership predicate did not match."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, resource: str, identifier: object) -> None:
        super().__init__(f"{resource} not found: {identifier}")
        self.resource = resource
        self.identifier = identifier


class FormValidationError(ChefNextDoorError):
    """Raised when client-side checks fail before any network call."""

    kind = ErrorKind.VALIDATION

    def __init__(self, fields: dict[str, str]) -> None:
        names = ", ".join(sorted(fields))
        super().__init__(f"Invalid fields: {names}")
        self.fields = dict(fields)


class BackendError(ChefNextDoorError):
    """Raised for any other data-layer failure, including network errors."""

    kind = ErrorKind.BACKEND

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(f"Failed to {operation}: {reason}")
        self.operation = operation
        self.reason = reason


def error_kind(error: BaseException) -> ErrorKind:
    """Classify an exception; anything unrecognized counts as a backend failure."""
    if isinstance(error, ChefNextDoorError):
        return error.kind
    return ErrorKind.BACKEND
