"""
novu_changes - Python client for the Novu /changes API.

List environment changes, follow their pagination, and promote them.
"""

__version__ = "0.1.0"

from ._client import Novu
from ._envelope import ErrorDetails, MessagesDetails, Success
from ._exceptions import (
    APIError,
    AuthenticationError,
    ConflictError,
    DecodeError,
    NotFoundError,
    NovuError,
    PermissionDeniedError,
    RateLimitError,
    ValidationError,
)
from ._types import Change, ChangesResponse, ChangeType

__all__ = [
    "APIError",
    "AuthenticationError",
    "Change",
    "ChangeType",
    "ChangesResponse",
    "ConflictError",
    "DecodeError",
    "ErrorDetails",
    "MessagesDetails",
    # Main client
    "Novu",
    "NotFoundError",
    "NovuError",
    "PermissionDeniedError",
    "RateLimitError",
    "Success",
    "ValidationError",
]
