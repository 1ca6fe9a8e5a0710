"""Ballot aggregation domain service.

Collapses a motion's ballots to one per member (last write wins, in the
order given) and sums them per value by count and by weight.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from assembly_engine.domain.models.ballot import Ballot, BallotAggregate, BallotValue


def aggregate_ballots(
    ballots: Iterable[Ballot],
    weights: Mapping[str, float] | None = None,
    default_weight: float = 1.0,
    *,
    motion_id: str | None = None,
) -> BallotAggregate:
    """Aggregate ballots per value.

    Args:
        ballots: Ballots in the order they were cast.
        weights: Voting weight per member id (proxied weight included).
        default_weight: Weight of a member missing from ``weights``.
        motion_id: When given, ballots cast on any other motion are ignored.

    Returns:
        BallotAggregate with counts and weights for every ballot value.
    """
    latest: dict[str, Ballot] = {}
    for ballot in ballots:
        if motion_id is not None and ballot.motion_id != motion_id:
            continue
        latest[ballot.member_id] = ballot

    counts = {value: 0 for value in BallotValue}
    totals = {value: 0.0 for value in BallotValue}
    for member_id, ballot in latest.items():
        weight = (weights or {}).get(member_id, default_weight)
        counts[ballot.value] += 1
        totals[ballot.value] += weight

    return BallotAggregate(counts=counts, weights=totals)
