"""Majority evaluation domain service.

Algorithm:
1. With abstention_as_against, abstentions join the against figure for the
   ratio (the raw abstain figure is still reported unmodified).
2. Denominator by base:
   - expressed:      for + effective against
   - total_eligible: eligible total supplied by the caller
   - present:        present total supplied by the caller
3. ratio = for / denominator (0 on a zero denominator); met = ratio >= threshold

Zero expressed votes is not an error: met is False.
"""

from __future__ import annotations

import structlog

from assembly_engine.domain.errors.configuration import PolicyNotConfiguredError
from assembly_engine.domain.errors.validation import MissingAggregateError
from assembly_engine.domain.models.ballot import TallyAggregate
from assembly_engine.domain.models.decision import MajorityResult
from assembly_engine.domain.models.policy import MajorityBase, VotePolicy

logger = structlog.get_logger(__name__)


def _denominator(policy: VotePolicy, tally: TallyAggregate, effective_against: float) -> float:
    if policy.base is MajorityBase.EXPRESSED:
        return tally.for_ + effective_against
    if policy.base is MajorityBase.TOTAL_ELIGIBLE:
        if tally.eligible is None:
            raise MissingAggregateError("eligible", policy.base.value)
        return tally.eligible
    if tally.present is None:
        raise MissingAggregateError("present", policy.base.value)
    return tally.present


def evaluate_majority(
    policy: VotePolicy | None,
    tally: TallyAggregate,
) -> MajorityResult:
    """Evaluate a vote policy against a tally.

    Args:
        policy: Effective vote policy; None when nothing is configured.
        tally: for/against/abstain figures (all counts or all weights).

    Returns:
        MajorityResult with met, ratio and the denominator used.

    Raises:
        PolicyNotConfiguredError: If policy is None.
        MissingAggregateError: If the base needs a total the tally lacks.
    """
    if policy is None:
        raise PolicyNotConfiguredError("vote")

    if policy.abstention_as_against:
        effective_against = tally.against + tally.abstain
    else:
        effective_against = tally.against

    denominator = _denominator(policy, tally, effective_against)
    if denominator <= 0:
        ratio = 0.0
        met = False
    else:
        ratio = tally.for_ / denominator
        met = ratio >= policy.threshold

    result = MajorityResult(
        policy_id=policy.id,
        base=policy.base,
        met=met,
        ratio=ratio,
        threshold=policy.threshold,
        denominator=float(denominator),
        votes_for=tally.for_,
        votes_against=tally.against,
        votes_abstain=tally.abstain,
        effective_against=effective_against,
        abstention_as_against=policy.abstention_as_against,
    )
    logger.debug(
        "majority_evaluated",
        policy_id=policy.id,
        base=policy.base.value,
        met=met,
        ratio=ratio,
        denominator=result.denominator,
    )
    return result


class MajorityEvaluator:
    """Object wrapper around evaluate_majority."""

    def evaluate(
        self, policy: VotePolicy | None, tally: TallyAggregate
    ) -> MajorityResult:
        return evaluate_majority(policy, tally)
