"""Laakhay Voyager - session and request orchestration for the LinkedIn Voyager API."""

from .client import VoyagerClient
from .config import VoyagerConfig
from .core import (
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
    Urn,
    VoyagerError,
    format_urn,
    get_id_from_urn,
    parse_urn,
)
from .models import ActionResult, Identity, RawResponse
from .runtime import EvasiveDispatcher, PageCollector, PagePolicy, PageResult, StopReason
from .session import Authenticator, AuthState, CookieStore

__version__ = "0.1.0"

__all__ = [
    "VoyagerClient",
    "VoyagerConfig",
    # Session
    "Authenticator",
    "AuthState",
    "CookieStore",
    # Runtime
    "EvasiveDispatcher",
    "PageCollector",
    "PagePolicy",
    "PageResult",
    "StopReason",
    # Models
    "Identity",
    "RawResponse",
    "ActionResult",
    # URN API
    "Urn",
    "parse_urn",
    "format_urn",
    "get_id_from_urn",
    # Exceptions
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
]
