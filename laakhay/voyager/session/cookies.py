"""Durable cookie storage for a Voyager session.

The store owns the in-memory cookie jar shared with the HTTP session and the
file that persists it between runs. The file holds a JSON array of raw
``Name=Value`` fragments, e.g. ``["li_at=AQED...", "JSESSIONID=\\"ajax:123\\""]``.

Concurrency:
    ``lock`` guards jar mutation (login) against jar reads (CSRF lookup). The
    methods here do not take it themselves; the authenticator and the
    dispatcher hold it around their own critical sections.
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
import tempfile
from http.cookies import CookieError, Morsel, SimpleCookie
from pathlib import Path

import aiohttp
from yarl import URL

from ..config import LINKEDIN_BASE_URL, SESSION_ID_COOKIE
from ..core.exceptions import CookieNotFoundError, CookieStoreError, InvalidInputError

logger = logging.getLogger(__name__)


class CookieStore:
    """Cookie jar plus its persisted copy."""

    def __init__(self, path: str | os.PathLike[str], base_url: str = LINKEDIN_BASE_URL) -> None:
        """Initialize cookie store.

        Args:
            path: Location of the durable cookie file
            base_url: Origin the cookies are scoped to
        """
        self.path = Path(path)
        self.url = URL(base_url)
        self.lock = asyncio.Lock()
        self._jar: aiohttp.CookieJar | None = None

    @property
    def jar(self) -> aiohttp.CookieJar:
        """Get or create the jar (requires a running event loop)."""
        if self._jar is None:
            self._jar = aiohttp.CookieJar()
        return self._jar

    def inject(self, raw: str) -> None:
        """Add a raw ``Name=Value[; attrs]`` cookie for the API domain.

        Attributes after the first ``;`` are ignored; the cookie is scoped to
        the store's origin. The value is kept verbatim, quotes included.

        Raises:
            InvalidInputError: If the fragment has no ``Name=`` part
        """
        self._update(self._parse(raw))

    @staticmethod
    def _parse(raw: str) -> Morsel[str]:
        fragment = raw.split(";", 1)[0].strip()
        name, sep, value = fragment.partition("=")
        name = name.strip()
        if not sep or not name:
            raise InvalidInputError(f"Invalid cookie fragment: {fragment!r}")
        value = value.strip()

        morsel: Morsel[str] = Morsel()
        try:
            morsel.set(name, value.strip('"'), value)
        except CookieError as e:
            raise InvalidInputError(f"Invalid cookie name: {name!r}") from e
        return morsel

    def _update(self, *morsels: Morsel[str]) -> None:
        cookie: SimpleCookie = SimpleCookie()
        for morsel in morsels:
            cookie[morsel.key] = morsel
        self.jar.update_cookies(cookie, response_url=self.url)

    def cookies(self) -> list[str]:
        """Current ``Name=Value`` fragments for the API domain, in jar order."""
        filtered = self.jar.filter_cookies(self.url)
        return [f"{morsel.key}={morsel.coded_value}" for morsel in filtered.values()]

    def clear(self) -> None:
        """Drop every cookie from the jar."""
        self.jar.clear()

    def current_session_id(self) -> str:
        """Session id cookie value without quotes, or ``""`` when absent."""
        for fragment in self.cookies():
            name, _, value = fragment.partition("=")
            if name == SESSION_ID_COOKIE:
                return value.strip('"')
        return ""

    def load(self) -> None:
        """Read the cookie file and inject every fragment into the jar.

        Raises:
            CookieNotFoundError: If the file does not exist
            CookieStoreError: If the file cannot be read, is not a JSON
                array of strings, or holds a fragment without a name. The jar
                is left untouched in that case.
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise CookieNotFoundError(str(self.path)) from e
        except OSError as e:
            raise CookieStoreError(f"Cannot read cookie file {self.path}: {e}") from e

        try:
            fragments = json.loads(raw)
        except json.JSONDecodeError as e:
            raise CookieStoreError(f"Cookie file {self.path} is not valid JSON: {e}") from e

        if not isinstance(fragments, list) or not all(isinstance(f, str) for f in fragments):
            raise CookieStoreError(f"Cookie file {self.path} must hold a JSON array of strings")

        try:
            morsels = [self._parse(f) for f in fragments if f.strip()]
        except InvalidInputError as e:
            raise CookieStoreError(f"Cookie file {self.path} holds a bad fragment: {e}") from e
        self._update(*morsels)

        logger.info("cookies_loaded", extra={"path": str(self.path), "count": len(morsels)})

    def save(self) -> None:
        """Overwrite the cookie file with the jar's current fragments.

        The file is written to a temporary sibling and renamed over the
        target, so readers never observe a partial write.

        Raises:
            CookieStoreError: If the file cannot be written
        """
        fragments = self.cookies()
        directory = self.path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", dir=directory)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(fragments, f)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise CookieStoreError(f"Cannot write cookie file {self.path}: {e}") from e

        logger.info("cookies_saved", extra={"path": str(self.path), "count": len(fragments)})
