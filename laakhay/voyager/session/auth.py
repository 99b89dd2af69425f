"""Session authentication.

The authenticator moves a client from UNAUTHENTICATED to AUTHENTICATED
exactly once, either by replaying persisted cookies or by running the login
handshake:

    1. Priming GET on the login endpoint (sets the initial JSESSIONID)
    2. Inject the identity's ``li_at``/``JSESSIONID`` pair, if any
    3. POST ``session_key``/``session_password``/``JSESSIONID`` as a form
    4. 401 -> UnauthorizedError, other non-200 -> RequestFailedError,
       ``login_result`` other than ``"PASS"`` -> ChallengeError
    5. Persist the jar

Both handshake requests carry the mobile client signature from
``VoyagerConfig.auth_headers`` and skip the evasion delay. Expired cookies are
never refreshed automatically; a later 401 reaches the caller as an ordinary
response.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from ..config import AUTH_TOKEN_COOKIE, SESSION_ID_COOKIE, VoyagerConfig
from ..core.exceptions import (
    ChallengeError,
    CookieNotFoundError,
    RequestFailedError,
    UnauthorizedError,
)
from ..models.identity import Identity
from ..utils.http import HTTPClient
from .cookies import CookieStore

logger = logging.getLogger(__name__)

LOGIN_PASS = "PASS"


class AuthState(str, Enum):
    """Coarse session state."""

    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATED = "authenticated"


class Authenticator:
    """Establishes the session held by a ``CookieStore``."""

    def __init__(self, http: HTTPClient, store: CookieStore, config: VoyagerConfig) -> None:
        self._http = http
        self._store = store
        self._config = config
        self._state = AuthState.UNAUTHENTICATED

    @property
    def state(self) -> AuthState:
        return self._state

    async def authenticate(self, identity: Identity, force_refresh: bool = False) -> None:
        """Authenticate, reusing persisted cookies unless ``force_refresh``.

        Args:
            identity: Credentials to log in with
            force_refresh: Skip cookie reuse and run the login handshake

        Raises:
            UnauthorizedError: Login rejected with 401
            RequestFailedError: Login returned another non-200 status
            ChallengeError: Login demanded a verification step
            CookieStoreError: Persisted cookies could not be read or written
            TransportError: A handshake request failed
        """
        async with self._store.lock:
            if self._state is AuthState.AUTHENTICATED and not force_refresh:
                return

            if not force_refresh:
                try:
                    self._store.load()
                except CookieNotFoundError:
                    logger.debug("auth_cookie_file_missing", extra={"path": str(self._store.path)})
                else:
                    self._state = AuthState.AUTHENTICATED
                    logger.info("auth_cookie_reuse", extra={"path": str(self._store.path)})
                    return

            if not identity.has_login_credentials:
                self._inject_identity_cookies(identity)
                self._store.save()
                self._state = AuthState.AUTHENTICATED
                logger.info("auth_cookie_replay", extra={"path": str(self._store.path)})
                return

            await self._login(identity)
            self._store.save()
            self._state = AuthState.AUTHENTICATED

    def _inject_identity_cookies(self, identity: Identity) -> None:
        if identity.has_cookie_credentials:
            self._store.inject(f"{AUTH_TOKEN_COOKIE}={identity.authentication_token}")
            self._store.inject(f"{SESSION_ID_COOKIE}={identity.session_cookie}")

    async def _login(self, identity: Identity) -> None:
        auth_url = self._config.auth_url
        headers = self._config.auth_headers

        # Priming request: establishes JSESSIONID before credentials are posted
        await self._http.get(auth_url, headers=headers)

        self._inject_identity_cookies(identity)

        form = {
            "session_key": identity.username,
            "session_password": identity.password,
            SESSION_ID_COOKIE: self._store.current_session_id(),
        }
        response = await self._http.post(auth_url, data=form, headers=headers)

        if response.status == 401:
            logger.warning("auth_login_failed", extra={"status": 401})
            raise UnauthorizedError()

        if response.status != 200:
            logger.warning("auth_login_failed", extra={"status": response.status})
            raise RequestFailedError(
                f"Authentication request failed with status: {response.status}",
                status_code=response.status,
            )

        data: Any = response.json()
        if isinstance(data, dict) and "login_result" in data:
            login_result = data["login_result"]
            if login_result != LOGIN_PASS:
                result = login_result if isinstance(login_result, str) else "Unknown"
                logger.warning("auth_login_failed", extra={"login_result": result})
                raise ChallengeError(result)

        logger.info("auth_login_passed", extra={"status": response.status})
