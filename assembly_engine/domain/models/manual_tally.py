"""Manual (degraded) tally domain model.

Operators enter vote figures by hand when electronic ballots are not
available. The persisted record holds four figures; the editor state
(manual_total_mode, last_edited) travels with it between edits so the
reconciliation rules stay pure functions of their inputs.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any


class TallyField(Enum):
    """Editable fields of a manual tally."""

    TOTAL = "total"
    FOR = "for"
    AGAINST = "against"
    ABSTAIN = "abstain"


@dataclass(frozen=True)
class TallyEdit:
    """A single operator edit.

    Attributes:
        field: Which figure was edited.
        value: Raw input; normalized to a non-negative int by the reconciler.
    """

    field: TallyField
    value: Any


@dataclass(frozen=True)
class ManualTally:
    """Operator-entered vote figures for one motion.

    Attributes:
        motion_id: Motion counted.
        manual_total: Number of voters.
        manual_for: Votes for.
        manual_against: Votes against.
        manual_abstain: Abstentions.
        manual_total_mode: True when the total is operator-fixed and
            ``manual_for`` is derived from it.
        last_edited: Most recent of against/abstain edited, used for clamping.
    """

    motion_id: str
    manual_total: int = 0
    manual_for: int = 0
    manual_against: int = 0
    manual_abstain: int = 0
    manual_total_mode: bool = False
    last_edited: TallyField | None = None

    @property
    def sum(self) -> int:
        return self.manual_for + self.manual_against + self.manual_abstain

    @property
    def is_consistent(self) -> bool:
        """Check the save-time arithmetic rule without raising."""
        return self.manual_total > 0 and self.sum == self.manual_total

    def with_figures(
        self,
        total: int,
        for_: int,
        against: int,
        abstain: int,
    ) -> ManualTally:
        return replace(
            self,
            manual_total=total,
            manual_for=for_,
            manual_against=against,
            manual_abstain=abstain,
        )

    def to_dict(self) -> dict[str, Any]:
        """Persisted figures only; the editor state is not stored."""
        return {
            "motion_id": self.motion_id,
            "manual_total": self.manual_total,
            "manual_for": self.manual_for,
            "manual_against": self.manual_against,
            "manual_abstain": self.manual_abstain,
        }
