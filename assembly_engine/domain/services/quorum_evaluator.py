"""Quorum evaluation domain service.

Algorithm by mode:
- single:   ratio = present / eligible on the policy basis; met = ratio >= threshold
- evolving: as single, but the threshold is threshold_call2 from the second
            convocation on (threshold when threshold_call2 is unset)
- double:   two independent ratios on denominator/threshold and
            denominator2/threshold2; met only when both hold

A zero denominator yields ratio 0 and met False; the evaluator never
divides by zero and never raises on attendance figures.
"""

from __future__ import annotations

import structlog

from assembly_engine.domain.errors.configuration import (
    MalformedPolicyError,
    PolicyNotConfiguredError,
)
from assembly_engine.domain.models.attendance import AttendanceAggregate
from assembly_engine.domain.models.decision import QuorumBlock, QuorumResult
from assembly_engine.domain.models.policy import QuorumBasis, QuorumMode, QuorumPolicy

logger = structlog.get_logger(__name__)

DEFAULT_RATIO_DECIMALS = 4


def _ratio_block(
    basis: QuorumBasis, threshold: float, attendance: AttendanceAggregate
) -> QuorumBlock:
    if basis is QuorumBasis.ELIGIBLE_MEMBERS:
        numerator = float(attendance.present_count)
        denominator = float(attendance.eligible_count)
    else:
        numerator = float(attendance.present_weight)
        denominator = float(attendance.eligible_weight)

    if denominator <= 0:
        return QuorumBlock(
            basis=basis,
            numerator=numerator,
            denominator=0.0,
            ratio=0.0,
            threshold=threshold,
            met=False,
        )

    ratio = numerator / denominator
    return QuorumBlock(
        basis=basis,
        numerator=numerator,
        denominator=denominator,
        ratio=ratio,
        threshold=threshold,
        met=ratio >= threshold,
    )


def effective_threshold(policy: QuorumPolicy, convocation_no: int) -> float:
    """Threshold of the primary condition for a given convocation.

    Args:
        policy: Quorum policy.
        convocation_no: 1 or 2.

    Returns:
        threshold_call2 for an evolving policy past the first convocation
        when it is set, threshold otherwise.
    """
    if (
        policy.mode is QuorumMode.EVOLVING
        and convocation_no != 1
        and policy.threshold_call2 is not None
    ):
        return policy.threshold_call2
    return policy.threshold


def _justification(
    policy: QuorumPolicy,
    convocation_no: int,
    details: tuple[QuorumBlock, ...],
    met: bool,
    decimals: int,
) -> str:
    parts = [
        f"basis {block.basis.value} (ratio {block.ratio:.{decimals}f} / "
        f"threshold {block.threshold:.{decimals}f})"
        for block in details
    ]
    outcome = "met" if met else "not met"
    return (
        f"{policy.name} (convocation {convocation_no}, {policy.mode.value}): "
        f"{'; '.join(parts)}. Result: {outcome}."
    )


def evaluate_quorum(
    policy: QuorumPolicy | None,
    attendance: AttendanceAggregate,
    convocation_no: int = 1,
    ratio_decimals: int = DEFAULT_RATIO_DECIMALS,
) -> QuorumResult:
    """Evaluate a quorum policy against attendance figures.

    Args:
        policy: Effective quorum policy; None when nothing is configured.
        attendance: Aggregated attendance with inclusion flags applied.
        convocation_no: Convocation number of the meeting.
        ratio_decimals: Precision of the ratios in the justification text.

    Returns:
        QuorumResult with met, ratio, ratio2 (double mode) and details.

    Raises:
        PolicyNotConfiguredError: If policy is None.
    """
    if policy is None:
        raise PolicyNotConfiguredError("quorum")

    primary = _ratio_block(
        policy.denominator, effective_threshold(policy, convocation_no), attendance
    )
    details: tuple[QuorumBlock, ...] = (primary,)
    met = primary.met
    ratio2: float | None = None

    if policy.mode is QuorumMode.DOUBLE:
        if policy.denominator2 is None or policy.threshold2 is None:
            raise MalformedPolicyError(
                policy.id, "denominator2", "double mode needs a second condition"
            )
        secondary = _ratio_block(policy.denominator2, policy.threshold2, attendance)
        details = (primary, secondary)
        met = primary.met and secondary.met
        ratio2 = secondary.ratio

    result = QuorumResult(
        policy_id=policy.id,
        mode=policy.mode,
        convocation_no=convocation_no,
        met=met,
        ratio=primary.ratio,
        ratio2=ratio2,
        details=details,
        justification=_justification(
            policy, convocation_no, details, met, ratio_decimals
        ),
    )
    logger.debug(
        "quorum_evaluated",
        policy_id=policy.id,
        mode=policy.mode.value,
        convocation_no=convocation_no,
        met=met,
        ratio=result.ratio,
        ratio2=ratio2,
    )
    return result


class QuorumEvaluator:
    """Object wrapper around evaluate_quorum with a fixed text precision."""

    def __init__(self, ratio_decimals: int = DEFAULT_RATIO_DECIMALS) -> None:
        self._ratio_decimals = ratio_decimals

    def evaluate(
        self,
        policy: QuorumPolicy | None,
        attendance: AttendanceAggregate,
        convocation_no: int = 1,
    ) -> QuorumResult:
        return evaluate_quorum(
            policy, attendance, convocation_no, ratio_decimals=self._ratio_decimals
        )
