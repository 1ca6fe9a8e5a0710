"""Evaluation result and decision domain models.

All values here are immutable snapshots. A Decision carries no timestamp
or counter: recomputing it from identical inputs yields an equal value,
so it can be overwritten freely by the persistence collaborator.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from assembly_engine.domain.models.policy import MajorityBase, QuorumBasis, QuorumMode


@dataclass(frozen=True)
class PolicyResolution:
    """Effective policies for a motion after override resolution.

    Attributes:
        quorum_policy_id: Effective quorum policy, None if none configured.
        vote_policy_id: Effective vote policy, None if none configured.
        quorum_is_override: True when the motion's own quorum policy applies.
        vote_is_override: True when the motion's own vote policy applies.
    """

    quorum_policy_id: str | None
    vote_policy_id: str | None
    quorum_is_override: bool
    vote_is_override: bool


@dataclass(frozen=True)
class QuorumBlock:
    """One quorum condition, as evaluated.

    Attributes:
        basis: Denominator used.
        numerator: Present count or weight.
        denominator: Eligible count or weight.
        ratio: numerator / denominator, 0 when the denominator is 0.
        threshold: Threshold applied.
        met: ratio >= threshold (never met on a zero denominator).
    """

    basis: QuorumBasis
    numerator: float
    denominator: float
    ratio: float
    threshold: float
    met: bool


@dataclass(frozen=True)
class QuorumResult:
    """Outcome of a quorum evaluation.

    Attributes:
        policy_id: Policy evaluated.
        mode: Policy mode.
        convocation_no: Convocation the threshold was chosen for.
        met: Whether quorum is reached (both conditions in double mode).
        ratio: Primary participation ratio.
        ratio2: Second ratio, double mode only.
        details: One block per condition.
        justification: Human-readable summary.
    """

    policy_id: str
    mode: QuorumMode
    convocation_no: int
    met: bool
    ratio: float
    ratio2: float | None
    details: tuple[QuorumBlock, ...]
    justification: str

    @property
    def threshold(self) -> float:
        return self.details[0].threshold


@dataclass(frozen=True)
class MajorityResult:
    """Outcome of a majority evaluation.

    The raw for/against/abstain figures are reported unmodified even when
    abstentions were counted as against for the ratio.

    Attributes:
        policy_id: Policy evaluated.
        base: Denominator kind.
        met: ratio >= threshold.
        ratio: for / denominator, 0 when the denominator is 0.
        threshold: Threshold applied.
        denominator: Denominator used.
        votes_for: Raw votes for.
        votes_against: Raw votes against.
        votes_abstain: Raw abstentions.
        effective_against: Against figure used for the ratio.
        abstention_as_against: Whether abstentions were counted as against.
    """

    policy_id: str
    base: MajorityBase
    met: bool
    ratio: float
    threshold: float
    denominator: float
    votes_for: float
    votes_against: float
    votes_abstain: float
    effective_against: float
    abstention_as_against: bool


class DecisionStatus(Enum):
    """Final status of a motion."""

    ADOPTED = "adopted"
    REJECTED = "rejected"
    UNDECIDED = "undecided"


class DecisionReason(Enum):
    """Reason code attached to a decision."""

    QUORUM_NOT_MET = "quorum_not_met"
    MAJORITY_REACHED = "majority_reached"
    MAJORITY_NOT_REACHED = "majority_not_reached"


class TallySource(Enum):
    """Where the figures behind a decision came from."""

    BALLOTS = "ballots"
    MANUAL = "manual"


@dataclass(frozen=True)
class Decision:
    """Consolidated, auditable decision on a motion.

    Attributes:
        motion_id: Motion decided.
        status: adopted, rejected or undecided.
        reason: Machine-readable reason.
        quorum_ratio: Primary quorum ratio.
        quorum_ratio2: Second quorum ratio (double mode).
        majority_ratio: Majority ratio, reported even when quorum failed.
        quorum_policy_id: Quorum policy applied.
        vote_policy_id: Vote policy applied.
        votes_for: Raw votes for.
        votes_against: Raw votes against.
        votes_abstain: Raw abstentions.
        source: ballots or manual.
        explanation: Human-readable reason with ratios and thresholds.
    """

    motion_id: str
    status: DecisionStatus
    reason: DecisionReason
    quorum_ratio: float
    quorum_ratio2: float | None
    majority_ratio: float
    quorum_policy_id: str
    vote_policy_id: str
    votes_for: float
    votes_against: float
    votes_abstain: float
    source: TallySource
    explanation: str

    @property
    def resolved_policy_ids(self) -> tuple[str, str]:
        return (self.quorum_policy_id, self.vote_policy_id)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for persistence.

        Returns:
            Dictionary with all decision fields, enums as their values.
        """
        return {
            "motion_id": self.motion_id,
            "status": self.status.value,
            "reason": self.reason.value,
            "quorum_ratio": self.quorum_ratio,
            "quorum_ratio2": self.quorum_ratio2,
            "majority_ratio": self.majority_ratio,
            "quorum_policy_id": self.quorum_policy_id,
            "vote_policy_id": self.vote_policy_id,
            "votes_for": self.votes_for,
            "votes_against": self.votes_against,
            "votes_abstain": self.votes_abstain,
            "source": self.source.value,
            "explanation": self.explanation,
        }
