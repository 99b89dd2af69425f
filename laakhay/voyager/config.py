"""Shared Voyager client constants and configuration.

This module centralizes URLs, header signatures and pacing bounds used by the
session and dispatch layers so the client facade can stay small and focused.

The header values are an external contract: the login endpoint only accepts
requests that look like the LinkedIn iOS app, so ``AUTH_REQUEST_HEADERS`` must
stay byte-exact.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

LINKEDIN_BASE_URL = "https://www.linkedin.com"
API_BASE_URL = f"{LINKEDIN_BASE_URL}/voyager/api"
AUTH_URL = f"{LINKEDIN_BASE_URL}/uas/authenticate"

COOKIE_FILE_PATH = ".cookies.json"
COOKIES_PATH_ENV = "LINKEDIN_COOKIES_PATH"
MIN_DELAY_ENV = "LINKEDIN_MIN_DELAY"
MAX_DELAY_ENV = "LINKEDIN_MAX_DELAY"

# Cookie names
SESSION_ID_COOKIE = "JSESSIONID"
AUTH_TOKEN_COOKIE = "li_at"

# The upstream accepts the raw session id as anti-forgery token
CSRF_HEADER = "csrf-token"

# Evasion delay bounds in seconds (inclusive)
MIN_EVASION_DELAY = 2.0
MAX_EVASION_DELAY = 5.0

# Runaway guard for paginated collection
MAX_REPEATED_REQUESTS = 200

# Per-request page sizes accepted by the upstream
MAX_SEARCH_COUNT = 49
MAX_UPDATE_COUNT = 100

# Sent on every call
REQUEST_HEADERS = {
    "user-agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_13_5) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/66.0.3359.181 Safari/537.36"
    ),
    "accept-language": "en-AU,en-GB;q=0.9,en-US;q=0.8,en;q=0.7",
    "x-li-lang": "en_US",
    "x-restli-protocol-version": "2.0.0",
}

# Mobile client signature for the priming GET and the login POST
AUTH_REQUEST_HEADERS = {
    "X-Li-User-Agent": "LIAuthLibrary:3.2.4 com.linkedin.LinkedIn:8.8.1 iPhone:8.3",
    "User-Agent": "LinkedIn/8.8.1 CFNetwork/711.3.18 Darwin/14.0.0",
    "X-User-Language": "en",
    "X-User-Locale": "en_US",
    "Accept-Language": "en-us",
}


@dataclass(frozen=True)
class VoyagerConfig:
    """Client configuration.

    Attributes:
        base_url: Origin used for cookie scoping and the login endpoint
        api_base_url: Prefix joined to every dispatched path
        auth_url: Login endpoint (priming GET and credential POST)
        cookie_path: Durable cookie file location
        min_delay: Lower bound of the evasion delay in seconds
        max_delay: Upper bound of the evasion delay in seconds
        max_requests: Page-fetch ceiling for paginated collection
        request_headers: Headers sent with every call
        auth_headers: Headers sent with the login handshake
    """

    base_url: str = LINKEDIN_BASE_URL
    api_base_url: str = API_BASE_URL
    auth_url: str = AUTH_URL
    cookie_path: str = COOKIE_FILE_PATH
    min_delay: float = MIN_EVASION_DELAY
    max_delay: float = MAX_EVASION_DELAY
    max_requests: int = MAX_REPEATED_REQUESTS
    request_headers: dict[str, str] = field(
        default_factory=lambda: dict(REQUEST_HEADERS), hash=False
    )
    auth_headers: dict[str, str] = field(
        default_factory=lambda: dict(AUTH_REQUEST_HEADERS), hash=False
    )

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.min_delay < 0 or self.max_delay < 0:
            raise ValueError("Evasion delay bounds must be non-negative")
        if self.min_delay > self.max_delay:
            raise ValueError(
                f"min_delay ({self.min_delay}) cannot exceed max_delay ({self.max_delay})"
            )
        if self.max_requests <= 0:
            raise ValueError("max_requests must be positive")
        if not self.cookie_path:
            raise ValueError("cookie_path cannot be empty")

    @classmethod
    def from_env(cls, **overrides: object) -> VoyagerConfig:
        """Build a config from environment variables.

        Reads ``LINKEDIN_COOKIES_PATH``, ``LINKEDIN_MIN_DELAY`` and
        ``LINKEDIN_MAX_DELAY``. Explicit keyword overrides win.
        """
        values: dict[str, object] = {}
        if COOKIES_PATH_ENV in os.environ:
            values["cookie_path"] = os.environ[COOKIES_PATH_ENV]
        if MIN_DELAY_ENV in os.environ:
            values["min_delay"] = float(os.environ[MIN_DELAY_ENV])
        if MAX_DELAY_ENV in os.environ:
            values["max_delay"] = float(os.environ[MAX_DELAY_ENV])
        values.update(overrides)
        return cls(**values)  # type: ignore[arg-type]
