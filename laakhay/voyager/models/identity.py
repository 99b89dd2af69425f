"""Credential material for a client session."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Identity(BaseModel):
    """Long-lived credentials.

    Either a username/password pair for interactive login, a
    token/session-cookie pair for cookie replay, or both (the login handshake
    injects the pair as cookies before posting credentials).
    """

    username: str | None = Field(default=None, min_length=1)
    password: str | None = Field(default=None, min_length=1, repr=False)
    authentication_token: str | None = Field(default=None, min_length=1, repr=False)
    session_cookie: str | None = Field(default=None, min_length=1, repr=False)

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @model_validator(mode="after")
    def validate_pairs(self) -> Identity:
        """Require at least one complete credential pair."""
        if not (self.has_login_credentials or self.has_cookie_credentials):
            raise ValueError(
                "Identity requires username and password, "
                "or authentication_token and session_cookie"
            )
        return self

    @property
    def has_login_credentials(self) -> bool:
        """Whether a username/password pair is present."""
        return bool(self.username and self.password)

    @property
    def has_cookie_credentials(self) -> bool:
        """Whether an authentication token/session cookie pair is present."""
        return bool(self.authentication_token and self.session_cookie)
