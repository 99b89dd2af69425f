"""Outcome models for mutating endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class ActionResult(BaseModel):
    """Outcome of a mutating call; ``ok`` is True on success."""

    ok: bool
    status_code: int = Field(..., ge=100, le=599)

    model_config = ConfigDict(frozen=True)
