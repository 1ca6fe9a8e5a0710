"""Decision API models.

Pydantic models for quorum, majority and decision results.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class QuorumBlockResponse(BaseModel):
    """One quorum condition (one per basis)."""

    model_config = ConfigDict(frozen=True)

    basis: Literal["eligible_members", "eligible_weight"] = Field(
        ..., description="Denominator of the ratio"
    )
    numerator: float = Field(..., ge=0.0, description="Present count or weight")
    denominator: float = Field(..., ge=0.0, description="Eligible count or weight")
    ratio: float = Field(..., ge=0.0, description="numerator / denominator, 0 when empty")
    threshold: float = Field(..., gt=0.0, le=1.0, description="Required ratio")
    met: bool = Field(..., description="Whether this condition holds")


class QuorumResultResponse(BaseModel):
    """Response model for a quorum evaluation.

    Attributes:
        policy_id: Quorum policy applied.
        mode: single, evolving or double.
        convocation_no: Convocation the threshold was taken for.
        met: Overall outcome (both conditions in double mode).
        ratio: Primary participation ratio.
        ratio2: Second ratio, double mode only.
        threshold: Effective primary threshold.
        details: One block per condition.
        justification: Human-readable sentence.
    """

    model_config = ConfigDict(frozen=True)

    policy_id: str
    mode: Literal["single", "evolving", "double"]
    convocation_no: int = Field(..., ge=1, le=2)
    met: bool
    ratio: float = Field(..., ge=0.0)
    ratio2: float | None = Field(default=None, ge=0.0)
    threshold: float = Field(..., gt=0.0, le=1.0)
    details: list[QuorumBlockResponse] = Field(default_factory=list)
    justification: str


class MajorityResultResponse(BaseModel):
    """Response model for a majority evaluation."""

    model_config = ConfigDict(frozen=True)

    policy_id: str
    base: Literal["expressed", "total_eligible", "present"]
    met: bool
    ratio: float = Field(..., ge=0.0)
    threshold: float = Field(..., gt=0.0, le=1.0)
    denominator: float = Field(..., ge=0.0)
    votes_for: float = Field(..., ge=0.0)
    votes_against: float = Field(..., ge=0.0)
    votes_abstain: float = Field(..., ge=0.0)
    effective_against: float = Field(
        ..., ge=0.0, description="Against figure used in the ratio"
    )
    abstention_as_against: bool


class DecisionResponse(BaseModel):
    """Response model for a consolidated decision.

    Attributes:
        motion_id: Motion decided.
        status: adopted, rejected or undecided.
        reason: quorum_not_met, majority_reached or majority_not_reached.
        quorum_ratio: Primary quorum ratio.
        quorum_ratio2: Second quorum ratio (double mode).
        majority_ratio: Majority ratio, reported even without quorum.
        quorum_policy_id: Quorum policy applied.
        vote_policy_id: Vote policy applied.
        votes_for: For figure of the official tally.
        votes_against: Against figure of the official tally.
        votes_abstain: Abstain figure of the official tally.
        source: ballots or manual.
        explanation: Human-readable sentence.
    """

    model_config = ConfigDict(frozen=True)

    motion_id: str
    status: Literal["adopted", "rejected", "undecided"]
    reason: Literal["quorum_not_met", "majority_reached", "majority_not_reached"]
    quorum_ratio: float = Field(..., ge=0.0)
    quorum_ratio2: float | None = None
    majority_ratio: float = Field(..., ge=0.0)
    quorum_policy_id: str
    vote_policy_id: str
    votes_for: float = Field(..., ge=0.0)
    votes_against: float = Field(..., ge=0.0)
    votes_abstain: float = Field(..., ge=0.0)
    source: Literal["ballots", "manual"]
    explanation: str
