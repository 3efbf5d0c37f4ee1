"""Typed error hierarchy for failures surfaced by the Novu API."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ._envelope import ErrorDetails, MessagesDetails


class NovuError(Exception):
    """Base exception for all novu_changes errors."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        error: str | None = None,
        details: ErrorDetails | MessagesDetails | None = None,
        method: str | None = None,
        path: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error = error
        self.details = details
        self.method = method
        self.path = path

    @property
    def messages(self) -> list[str]:
        """Server messages; a single-message error yields a one-item list."""
        if self.details is None:
            return [self.message]
        return self.details.as_list()


class AuthenticationError(NovuError):
    """401 — invalid or missing API key."""


class PermissionDeniedError(NovuError):
    """403 — insufficient permissions."""


class NotFoundError(NovuError):
    """404 — resource does not exist."""


class ConflictError(NovuError):
    """409 — change already applied or conflicts."""


class ValidationError(NovuError):
    """400/422 — invalid request parameters."""


class RateLimitError(NovuError):
    """429 — too many requests."""


class APIError(NovuError):
    """500+ — server-side error, or the request never got a response."""


class DecodeError(NovuError):
    """Success payload did not match the expected shape."""


# Map HTTP status codes to exception classes.
STATUS_MAP: dict[int, type[NovuError]] = {
    400: ValidationError,
    401: AuthenticationError,
    403: PermissionDeniedError,
    404: NotFoundError,
    409: ConflictError,
    422: ValidationError,
    429: RateLimitError,
}
