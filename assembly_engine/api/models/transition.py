"""Lifecycle transition API models."""

from pydantic import BaseModel, ConfigDict, Field


class TransitionIssueResponse(BaseModel):
    """A blocking reason or a warning."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="Machine-readable reason code")
    message: str


class TransitionCheckResponse(BaseModel):
    """Response model for a motion or meeting transition check.

    Attributes:
        target: Status the check was made for.
        ok: Whether the transition is allowed.
        reasons: Every blocking reason (empty when ok).
        warnings: Non-blocking remarks.
    """

    model_config = ConfigDict(frozen=True)

    target: str
    ok: bool
    reasons: list[TransitionIssueResponse] = Field(default_factory=list)
    warnings: list[TransitionIssueResponse] = Field(default_factory=list)
