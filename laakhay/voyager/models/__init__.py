"""Data models.

Architecture:
    This module exports the Pydantic v2 models shared by the session,
    dispatch and endpoint layers. All models are immutable (frozen=True).

Model Categories:
    - Credentials: Identity
    - Transport: RawResponse
    - Outcomes: ActionResult
"""

from .identity import Identity
from .response import RawResponse
from .results import ActionResult

__all__ = [
    "Identity",
    "RawResponse",
    "ActionResult",
]
