from __future__ import annotations

from typing import Sequence


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised at the HTTP boundary when an addressed entity does not exist."""


class ImportFormatError(DomainError):
    """Raised when an imported file cannot be accepted as a whole.

    ``rows`` holds 1-based line numbers of offending rows when known.
    """

    def __init__(self, message: str, *, rows: Sequence[int] = ()):
        super().__init__(message)
        self.rows = tuple(rows)
