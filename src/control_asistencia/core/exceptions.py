from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid."""


class BackendError(DomainError):
    """Raised when Supabase rejects or fails a query.

    `code` carries the PostgreSQL/PostgREST error code when the backend sent one.
    """

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code
