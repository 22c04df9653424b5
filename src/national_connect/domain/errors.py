"""Error kinds raised by directory store operations."""

from enum import StrEnum


class ErrorKind(StrEnum):
    """Failure categories the transport maps to status codes."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"


class DirectoryError(Exception):
    """Base class for errors raised by store operations."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(DirectoryError):
    """A required field is missing or invalid."""

    kind = ErrorKind.VALIDATION


class NotFoundError(DirectoryError):
    """A referenced id does not resolve in its collection."""

    kind = ErrorKind.NOT_FOUND


class InternalError(DirectoryError):
    """An unexpected failure while processing an operation."""

    kind = ErrorKind.INTERNAL
