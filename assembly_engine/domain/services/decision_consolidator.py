"""Decision consolidation domain service.

Rule:
- quorum not met   -> undecided, quorum_not_met (majority ratio still reported)
- majority met     -> adopted, majority_reached
- majority not met -> rejected, majority_not_reached

The decision is a pure function of its inputs: no timestamps, counters or
random ids, so consolidating twice yields equal values.
"""

from __future__ import annotations

import structlog

from assembly_engine.domain.models.attendance import AttendanceAggregate
from assembly_engine.domain.models.ballot import BallotAggregate, TallyAggregate
from assembly_engine.domain.models.decision import (
    Decision,
    DecisionReason,
    DecisionStatus,
    MajorityResult,
    QuorumBlock,
    QuorumResult,
    TallySource,
)
from assembly_engine.domain.models.manual_tally import ManualTally
from assembly_engine.domain.models.policy import MajorityBase, QuorumBasis

logger = structlog.get_logger(__name__)

_BASIS_LABELS = {
    QuorumBasis.ELIGIBLE_MEMBERS: "of eligible members",
    QuorumBasis.ELIGIBLE_WEIGHT: "of eligible weight",
}

_BASE_LABELS = {
    MajorityBase.EXPRESSED: "of expressed votes",
    MajorityBase.TOTAL_ELIGIBLE: "of eligible votes",
    MajorityBase.PRESENT: "of present votes",
}


def format_pct(value: float) -> str:
    """Format a ratio as a percentage: whole when close, else one decimal."""
    pct = value * 100
    if abs(pct - round(pct)) < 0.01:
        return f"{round(pct)}%"
    return f"{pct:.1f}%"


def _failing_block(quorum: QuorumResult) -> QuorumBlock:
    for block in quorum.details:
        if not block.met:
            return block
    return quorum.details[0]


def _explain(quorum: QuorumResult, majority: MajorityResult, reason: DecisionReason) -> str:
    if reason is DecisionReason.QUORUM_NOT_MET:
        block = _failing_block(quorum)
        return (
            f"Quorum not met ({format_pct(block.ratio)} < "
            f"{format_pct(block.threshold)} {_BASIS_LABELS[block.basis]})"
        )

    label = _BASE_LABELS[majority.base]
    if reason is DecisionReason.MAJORITY_REACHED:
        return (
            f"Majority reached ({format_pct(majority.ratio)} >= "
            f"{format_pct(majority.threshold)} {label})"
        )
    return (
        f"Majority not reached ({format_pct(majority.ratio)} < "
        f"{format_pct(majority.threshold)} {label})"
    )


def consolidate(
    quorum_result: QuorumResult,
    majority_result: MajorityResult,
    *,
    motion_id: str,
    source: TallySource = TallySource.BALLOTS,
) -> Decision:
    """Combine quorum and majority outcomes into a decision.

    Args:
        quorum_result: Outcome of the quorum evaluation.
        majority_result: Outcome of the majority evaluation.
        motion_id: Motion being decided.
        source: Where the vote figures came from.

    Returns:
        The consolidated Decision.
    """
    if not quorum_result.met:
        status = DecisionStatus.UNDECIDED
        reason = DecisionReason.QUORUM_NOT_MET
    elif majority_result.met:
        status = DecisionStatus.ADOPTED
        reason = DecisionReason.MAJORITY_REACHED
    else:
        status = DecisionStatus.REJECTED
        reason = DecisionReason.MAJORITY_NOT_REACHED

    decision = Decision(
        motion_id=motion_id,
        status=status,
        reason=reason,
        quorum_ratio=quorum_result.ratio,
        quorum_ratio2=quorum_result.ratio2,
        majority_ratio=majority_result.ratio,
        quorum_policy_id=quorum_result.policy_id,
        vote_policy_id=majority_result.policy_id,
        votes_for=majority_result.votes_for,
        votes_against=majority_result.votes_against,
        votes_abstain=majority_result.votes_abstain,
        source=source,
        explanation=_explain(quorum_result, majority_result, reason),
    )
    logger.debug(
        "decision_consolidated",
        motion_id=motion_id,
        status=status.value,
        reason=reason.value,
    )
    return decision


def select_tally_source(
    manual: ManualTally | None,
    ballots: BallotAggregate,
    attendance: AttendanceAggregate | None = None,
    *,
    use_weights: bool = True,
) -> tuple[TallyAggregate, TallySource]:
    """Pick the official figures for a motion.

    A manual tally wins when its total is positive and it is consistent;
    otherwise the electronic ballots are used. Manual figures are head
    counts, so the eligible/present totals follow the unit of the source.

    Args:
        manual: Stored manual tally, if any.
        ballots: Aggregated electronic ballots.
        attendance: Eligible and present totals for the total_eligible and
            present majority bases.
        use_weights: Use ballot weights rather than counts.

    Returns:
        The tally aggregate and its source.
    """
    if manual is not None and manual.is_consistent:
        tally = TallyAggregate(
            for_=manual.manual_for,
            against=manual.manual_against,
            abstain=manual.manual_abstain,
            eligible=attendance.eligible_count if attendance else None,
            present=attendance.present_count if attendance else None,
        )
        return tally, TallySource.MANUAL

    eligible: float | None = None
    present: float | None = None
    if attendance is not None:
        if use_weights:
            eligible, present = attendance.eligible_weight, attendance.present_weight
        else:
            eligible, present = attendance.eligible_count, attendance.present_count

    tally = ballots.to_tally(use_weights=use_weights, eligible=eligible, present=present)
    return tally, TallySource.BALLOTS


class DecisionConsolidator:
    """Object wrapper around consolidate."""

    def consolidate(
        self,
        quorum_result: QuorumResult,
        majority_result: MajorityResult,
        *,
        motion_id: str,
        source: TallySource = TallySource.BALLOTS,
    ) -> Decision:
        return consolidate(
            quorum_result, majority_result, motion_id=motion_id, source=source
        )
