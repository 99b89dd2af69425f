"""Session establishment and cookie persistence."""

from .auth import Authenticator, AuthState
from .cookies import CookieStore

__all__ = ["AuthState", "Authenticator", "CookieStore"]
