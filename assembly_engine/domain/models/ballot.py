"""Ballot and tally aggregate domain models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from assembly_engine.domain.errors.validation import TallyValidationError


class BallotValue(Enum):
    """Value of a single ballot."""

    FOR = "for"
    AGAINST = "against"
    ABSTAIN = "abstain"


@dataclass(frozen=True)
class Ballot:
    """One member's ballot on one motion.

    A member holds at most one ballot per motion; a later ballot replaces
    an earlier one (last write wins).

    Attributes:
        motion_id: Motion voted on.
        member_id: Voting member.
        value: for, against or abstain.
        manual: True when entered by an operator rather than electronically.
    """

    motion_id: str
    member_id: str
    value: BallotValue
    manual: bool = False


@dataclass(frozen=True)
class TallyAggregate:
    """Figures consumed by the majority evaluator.

    for_/against/abstain are either all counts or all weights. eligible and
    present are only needed by the total_eligible and present majority bases.

    Attributes:
        for_: Votes for.
        against: Votes against.
        abstain: Abstentions.
        eligible: Total eligible votes (total_eligible base).
        present: Total present votes (present base).
    """

    for_: float
    against: float
    abstain: float
    eligible: float | None = None
    present: float | None = None

    def __post_init__(self) -> None:
        for name in ("for_", "against", "abstain", "eligible", "present"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise TallyValidationError(
                    "invalid_numbers",
                    f"Tally figure {name.rstrip('_')} must be non-negative, got {value}",
                    field=name.rstrip("_"),
                    detail={name.rstrip("_"): value},
                )

    @property
    def expressed(self) -> float:
        """Votes actually cast, abstentions included."""
        return self.for_ + self.against + self.abstain


@dataclass(frozen=True)
class BallotAggregate:
    """Ballots of a motion summed per value, by count and by weight.

    Attributes:
        counts: Number of ballots per value.
        weights: Summed member weight per value.
    """

    counts: dict[BallotValue, int]
    weights: dict[BallotValue, float]

    @property
    def ballot_count(self) -> int:
        return sum(self.counts.values())

    def to_tally(
        self,
        use_weights: bool = True,
        eligible: float | None = None,
        present: float | None = None,
    ) -> TallyAggregate:
        """Build the majority evaluator input.

        Args:
            use_weights: Sum weights (default) or count ballots.
            eligible: Total eligible votes, in the same unit.
            present: Total present votes, in the same unit.

        Returns:
            TallyAggregate in the chosen unit.
        """
        source: dict[BallotValue, int] | dict[BallotValue, float]
        source = self.weights if use_weights else self.counts
        return TallyAggregate(
            for_=source.get(BallotValue.FOR, 0),
            against=source.get(BallotValue.AGAINST, 0),
            abstain=source.get(BallotValue.ABSTAIN, 0),
            eligible=eligible,
            present=present,
        )
