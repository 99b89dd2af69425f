"""Custom exception hierarchy."""

from __future__ import annotations


class VoyagerError(Exception):
    """Base exception for all library errors."""

    pass


class AuthenticationError(VoyagerError):
    """Login handshake did not produce an authenticated session."""

    pass


class UnauthorizedError(AuthenticationError):
    """Credentials were rejected (login returned 401)."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message)
        self.status_code = 401


class ChallengeError(AuthenticationError):
    """Upstream demanded a verification step this client cannot perform.

    The raw ``login_result`` value (e.g. ``"CHALLENGE"``) is kept on the
    exception so callers can tell a security checkpoint from a CAPTCHA.
    """

    def __init__(self, login_result: str) -> None:
        super().__init__(f"Challenge encountered: {login_result}")
        self.login_result = login_result


class RequestFailedError(VoyagerError):
    """Non-2xx status with no more specific classification."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class RateLimitError(RequestFailedError):
    """Upstream throttling signal."""

    def __init__(self, message: str, retry_after: int = 60) -> None:
        super().__init__(message, status_code=429)
        self.retry_after = retry_after


class InvalidInputError(VoyagerError, ValueError):
    """Malformed identifier or missing identifying parameter."""

    pass


class CookieNotFoundError(VoyagerError):
    """No persisted cookie file exists at the configured path."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Cookie file not found: {path}")
        self.path = path


class CookieStoreError(VoyagerError):
    """Persisted cookie file could not be read, decoded or written."""

    pass


class TransportError(VoyagerError):
    """HTTP call failed before a response was received."""

    pass


class ResponseDecodeError(VoyagerError):
    """Response body is not valid JSON."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
