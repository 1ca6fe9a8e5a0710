"""Attendance domain models.

Raw attendance is one record per roster member. Proxies transfer a giver's
weight to a receiver while the giver stays "absent" in raw attendance.
Evaluators never see raw records: they consume an AttendanceAggregate in
which the include_proxies / count_remote flags are already applied.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from assembly_engine.domain.errors.validation import TallyValidationError


class AttendanceMode(Enum):
    """How a member attends the meeting."""

    PRESENT = "present"
    REMOTE = "remote"
    ABSENT = "absent"


@dataclass(frozen=True)
class AttendanceRecord:
    """Attendance of one roster member.

    Attributes:
        member_id: Member identifier.
        mode: present, remote or absent.
        weight: Voting power of the member (non-negative).
        present_from: When the member arrived, for the late-arrival rule.
    """

    member_id: str
    mode: AttendanceMode = AttendanceMode.ABSENT
    weight: float = 1.0
    present_from: datetime | None = None

    def __post_init__(self) -> None:
        if self.weight < 0:
            raise TallyValidationError(
                "invalid_weight",
                f"Member {self.member_id} has a negative weight ({self.weight})",
                field="weight",
                detail={"weight": self.weight},
            )


@dataclass(frozen=True)
class Proxy:
    """Delegation of a giver's vote to a receiver.

    Attributes:
        giver_id: Member who delegates (stays absent in raw attendance).
        receiver_id: Member who carries the giver's weight.
    """

    giver_id: str
    receiver_id: str


@dataclass(frozen=True)
class AttendanceAggregate:
    """Participation figures consumed by the quorum evaluator.

    Attributes:
        present_count: Members counted as present.
        present_weight: Weight counted as present.
        eligible_count: Members eligible to vote.
        eligible_weight: Weight eligible to vote.
    """

    present_count: int
    present_weight: float
    eligible_count: int
    eligible_weight: float

    def __post_init__(self) -> None:
        for name in ("present_count", "present_weight", "eligible_count", "eligible_weight"):
            value = getattr(self, name)
            if value < 0:
                raise TallyValidationError(
                    "invalid_numbers",
                    f"Attendance figure {name} must be non-negative, got {value}",
                    field=name,
                    detail={name: value},
                )
