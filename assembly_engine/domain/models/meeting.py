"""Meeting domain model and lifecycle transition matrix.

State Machine:
    draft <-> scheduled <-> frozen -> live -> closed -> validated -> archived

    draft/scheduled and scheduled/frozen are bidirectional; everything
    from live onward is forward-only. Archived is terminal: a meeting is
    never deleted, only archived.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class MeetingStatus(Enum):
    """Status in the meeting lifecycle."""

    DRAFT = "draft"
    SCHEDULED = "scheduled"
    FROZEN = "frozen"
    LIVE = "live"
    CLOSED = "closed"
    VALIDATED = "validated"
    ARCHIVED = "archived"

    def is_terminal(self) -> bool:
        """Check if no transition leaves this status."""
        return not self.valid_transitions()

    def valid_transitions(self) -> frozenset[MeetingStatus]:
        """Get valid target statuses from this status."""
        return MEETING_TRANSITION_MATRIX.get(self, frozenset())


# Maps each status to its valid target statuses
MEETING_TRANSITION_MATRIX: dict[MeetingStatus, frozenset[MeetingStatus]] = {
    MeetingStatus.DRAFT: frozenset({MeetingStatus.SCHEDULED}),
    MeetingStatus.SCHEDULED: frozenset({MeetingStatus.DRAFT, MeetingStatus.FROZEN}),
    MeetingStatus.FROZEN: frozenset({MeetingStatus.SCHEDULED, MeetingStatus.LIVE}),
    MeetingStatus.LIVE: frozenset({MeetingStatus.CLOSED}),
    MeetingStatus.CLOSED: frozenset({MeetingStatus.VALIDATED}),
    MeetingStatus.VALIDATED: frozenset({MeetingStatus.ARCHIVED}),
    MeetingStatus.ARCHIVED: frozenset(),
}

# Lifecycle order, used to tell forward moves from backward ones
MEETING_STATUS_ORDER: tuple[MeetingStatus, ...] = tuple(MeetingStatus)


@dataclass(frozen=True)
class Meeting:
    """A general meeting.

    Attributes:
        id: Meeting identifier.
        status: Current lifecycle status, changed only via the state machine.
        default_quorum_policy_id: Quorum policy used when a motion has no override.
        default_vote_policy_id: Vote policy used when a motion has no override.
        convocation_no: 1 for the first calling, 2 for the second.
    """

    id: str
    status: MeetingStatus = MeetingStatus.DRAFT
    default_quorum_policy_id: str | None = None
    default_vote_policy_id: str | None = None
    convocation_no: int = 1

    def __post_init__(self) -> None:
        if self.convocation_no not in (1, 2):
            raise ValueError(
                f"convocation_no must be 1 or 2, got {self.convocation_no}"
            )

    def with_status(self, status: MeetingStatus) -> Meeting:
        """Return a copy in the given status (no guard applied here)."""
        return replace(self, status=status)


@dataclass(frozen=True)
class MeetingChecklist:
    """Readiness facts gathered by the caller before a meeting transition.

    Every field defaults to the "not ready" value so a forgotten fact
    blocks rather than passes.

    Attributes:
        has_members: The member roster is not empty.
        has_attendance: At least one attendance has been recorded.
        has_motions: At least one motion has been created.
        policies_assigned: Default quorum and vote policies are set.
        has_president: A president has been designated.
        open_motions: Number of motions currently open.
        undecided_motions: Closed motions without a usable result.
        quorum_met: Meeting-level quorum, if known (warning only).
        all_consolidated: All results consolidated, if known (warning only).
    """

    has_members: bool = False
    has_attendance: bool = False
    has_motions: bool = False
    policies_assigned: bool = False
    has_president: bool = False
    open_motions: int = 0
    undecided_motions: int = 0
    quorum_met: bool | None = None
    all_consolidated: bool | None = None


@dataclass(frozen=True)
class TransitionIssue:
    """One blocking reason or warning for a transition.

    Attributes:
        code: Machine-readable code (e.g. "no_attendance").
        message: Human-readable explanation.
    """

    code: str
    message: str


@dataclass(frozen=True)
class TransitionCheck:
    """Outcome of a transition predicate.

    Attributes:
        ok: True when no blocking reason was found.
        reasons: Blocking reasons; empty when ok.
        warnings: Non-blocking observations.
    """

    ok: bool
    reasons: tuple[TransitionIssue, ...] = ()
    warnings: tuple[TransitionIssue, ...] = ()

    @property
    def reason_codes(self) -> tuple[str, ...]:
        return tuple(issue.code for issue in self.reasons)

    @property
    def reason(self) -> TransitionIssue | None:
        """First blocking reason, None when ok."""
        return self.reasons[0] if self.reasons else None

    @classmethod
    def allowed(cls, warnings: tuple[TransitionIssue, ...] = ()) -> TransitionCheck:
        return cls(ok=True, reasons=(), warnings=warnings)

    @classmethod
    def blocked(
        cls,
        reasons: tuple[TransitionIssue, ...],
        warnings: tuple[TransitionIssue, ...] = (),
    ) -> TransitionCheck:
        return cls(ok=False, reasons=reasons, warnings=warnings)
