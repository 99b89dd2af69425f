"""Raw HTTP response model."""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..core.exceptions import ResponseDecodeError


class RawResponse(BaseModel):
    """Fully-read HTTP response.

    Status codes are not interpreted here; endpoint adapters decide what a
    given status means.
    """

    status: int = Field(..., ge=100, le=599)
    url: str = ""
    headers: dict[str, str] = Field(default_factory=dict)
    body: bytes = b""

    model_config = ConfigDict(frozen=True)

    @property
    def ok(self) -> bool:
        """True for 2xx statuses."""
        return 200 <= self.status < 300

    def text(self, encoding: str = "utf-8") -> str:
        """Decode body as text."""
        return self.body.decode(encoding, errors="replace")

    def json(self) -> Any:
        """Decode body as JSON.

        Raises:
            ResponseDecodeError: If the body is not valid JSON
        """
        try:
            return json.loads(self.body)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ResponseDecodeError(
                f"Invalid JSON body from {self.url or 'response'}: {e}",
                status_code=self.status,
            ) from e
