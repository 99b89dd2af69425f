"""Core components."""

from .exceptions import (
    AuthenticationError,
    ChallengeError,
    CookieNotFoundError,
    CookieStoreError,
    InvalidInputError,
    RateLimitError,
    RequestFailedError,
    ResponseDecodeError,
    TransportError,
    UnauthorizedError,
    VoyagerError,
)
from .urn import Urn, format_urn, get_id_from_urn, parse_urn

__all__ = [
    "VoyagerError",
    "AuthenticationError",
    "UnauthorizedError",
    "ChallengeError",
    "RequestFailedError",
    "RateLimitError",
    "InvalidInputError",
    "CookieNotFoundError",
    "CookieStoreError",
    "TransportError",
    "ResponseDecodeError",
    # URN API
    "Urn",
    "parse_urn",
    "format_urn",
    "get_id_from_urn",
]
