"""Manual tally API models."""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

NonNegativeInt = Annotated[int, Field(ge=0)]


class TallyEditRequest(BaseModel):
    """One operator edit of a manual tally draft.

    ``value`` is kept raw: the reconciler normalizes it (leading-integer
    parsing, anything unusable becomes 0).
    """

    field: Literal["total", "for", "against", "abstain"] = Field(
        ..., description="Figure being edited"
    )
    value: int | float | str | None = Field(
        default=None, description="Raw operator input"
    )


class ManualTallyResponse(BaseModel):
    """Response model for a manual tally (draft or stored).

    Attributes:
        motion_id: Motion counted.
        manual_total: Number of voters.
        manual_for: Votes for.
        manual_against: Votes against.
        manual_abstain: Abstentions.
        manual_total_mode: Whether ``manual_for`` is derived from the total.
        consistent: Whether the figures would pass save validation.
    """

    model_config = ConfigDict(frozen=True)

    motion_id: str
    manual_total: NonNegativeInt
    manual_for: NonNegativeInt
    manual_against: NonNegativeInt
    manual_abstain: NonNegativeInt
    manual_total_mode: bool = False
    consistent: bool
