"""Shared domain error messages and error types."""

from typing import Optional


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity or path does not exist."""


class MalformedInputError(ValidationError):
    """Delimited text that cannot be parsed (bad quoting, ragged rows).

    No partial result accompanies this error.
    """

    def __init__(self, message: str, filename: Optional[str] = None, line: Optional[int] = None):
        self.filename = filename
        self.line = line

        location = filename or ""
        if line is not None:
            location = f"{location}:{line}" if location else f"line {line}"
        super().__init__(f"{location}: {message}" if location else message)


class StorageError(DomainError):
    """A store operation failed; the batch it belonged to was rolled back."""


def file_not_found(path: str) -> str:
    """Return message for a missing input file."""
    return f"File not found: {path}"


def column_count_mismatch(expected: int, found: int) -> str:
    """Return message for a row whose width differs from the header."""
    return f"expected {expected} column{'s' if expected != 1 else ''}, found {found}"
