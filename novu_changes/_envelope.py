"""Response envelope — every API body is one of Success, Error or Messages."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar, Union

from ._exceptions import STATUS_MAP, APIError, NovuError

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """A body that is not an error envelope."""

    payload: T


@dataclass(frozen=True)
class ErrorDetails:
    """Server error with a single message, e.g. ``{"statusCode": 404, "message": "..."}``."""

    status_code: int
    message: str
    error: str | None = None

    def as_list(self) -> list[str]:
        return [self.message]


@dataclass(frozen=True)
class MessagesDetails:
    """Server error carrying a list of (usually validation) messages."""

    status_code: int
    messages: list[str] = field(default_factory=list)
    error: str | None = None

    @property
    def message(self) -> str:
        return "; ".join(self.messages) or self.error or f"HTTP {self.status_code}"

    def as_list(self) -> list[str]:
        return list(self.messages)


Envelope = Union[Success[Any], ErrorDetails, MessagesDetails]


def decode_envelope(body: Any) -> Envelope:
    """Classify a decoded JSON body by shape."""
    if isinstance(body, dict) and "statusCode" in body and "message" in body:
        status = body["statusCode"]
        message = body["message"]
        if isinstance(status, int) and not isinstance(status, bool):
            if isinstance(message, str):
                return ErrorDetails(status_code=status, message=message, error=body.get("error"))
            if isinstance(message, list):
                return MessagesDetails(
                    status_code=status,
                    messages=[str(m) for m in message],
                    error=body.get("error"),
                )
    return Success(body)


def error_from_details(
    details: ErrorDetails | MessagesDetails,
    *,
    method: str | None = None,
    path: str | None = None,
) -> NovuError:
    """Build the typed exception for an Error or Messages envelope."""
    exc_cls = STATUS_MAP.get(details.status_code, APIError)
    return exc_cls(
        details.message,
        status_code=details.status_code,
        error=details.error,
        details=details,
        method=method,
        path=path,
    )


def unwrap(envelope: Envelope, *, method: str | None = None, path: str | None = None) -> Any:
    """Return the success payload or raise the envelope's typed failure."""
    if isinstance(envelope, Success):
        return envelope.payload
    raise error_from_details(envelope, method=method, path=path)
