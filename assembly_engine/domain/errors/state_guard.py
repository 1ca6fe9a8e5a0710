"""State guard errors for the motion and meeting lifecycles.

This module defines errors for operations attempted from a state that does
not permit them: editing a motion that is no longer pending, opening a
second motion while one is open, or moving a meeting along a transition
that is not adjacent or whose readiness checklist is incomplete.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from assembly_engine.domain.exceptions import AssemblyError

if TYPE_CHECKING:
    from assembly_engine.domain.models.meeting import MeetingStatus, TransitionIssue
    from assembly_engine.domain.models.motion import MotionStatus


class StateGuardError(AssemblyError):
    """Base class for lifecycle guard violations."""

    reason_code = "state_guard"


class MotionLockedError(StateGuardError):
    """Raised when a motion is edited or deleted outside ``pending``.

    Attributes:
        motion_id: The locked motion.
        state: The blocking state (open or closed).
        action: What was attempted ("edit" or "delete").
    """

    def __init__(self, motion_id: str, state: MotionStatus, action: str) -> None:
        self.motion_id = motion_id
        self.state = state
        self.action = action
        super().__init__(
            f"Motion {motion_id} is {state.value}: {action} is only permitted while pending",
            reason_code=f"motion_{state.value}_locked",
        )


class MotionAlreadyOpenError(StateGuardError):
    """Raised when opening a motion while another one is open.

    The previous motion is never closed implicitly: the caller must close
    it first.

    Attributes:
        meeting_id: The meeting both motions belong to.
        open_motion_id: The motion currently open.
    """

    reason_code = "another_motion_open"

    def __init__(self, meeting_id: str, open_motion_id: str) -> None:
        self.meeting_id = meeting_id
        self.open_motion_id = open_motion_id
        super().__init__(
            f"Meeting {meeting_id} already has motion {open_motion_id} open; "
            "close it before opening another"
        )


class InvalidMotionTransitionError(StateGuardError):
    """Raised when a motion transition is not in the lifecycle.

    Attributes:
        motion_id: The motion.
        from_state: Current state.
        to_state: Attempted target state.
    """

    def __init__(
        self, motion_id: str, from_state: MotionStatus, to_state: MotionStatus
    ) -> None:
        self.motion_id = motion_id
        self.from_state = from_state
        self.to_state = to_state
        if from_state is to_state:
            code = f"motion_already_{to_state.value}"
        else:
            code = "invalid_motion_transition"
        super().__init__(
            f"Motion {motion_id}: invalid transition {from_state.value} -> {to_state.value}",
            reason_code=code,
        )


class InvalidMeetingTransitionError(StateGuardError):
    """Raised when a meeting transition is not adjacent in the lifecycle.

    Attributes:
        from_state: Current meeting status.
        to_state: Attempted target status.
        allowed_transitions: Valid targets from the current status.
    """

    reason_code = "invalid_meeting_transition"

    def __init__(
        self,
        from_state: MeetingStatus,
        to_state: MeetingStatus,
        allowed_transitions: list[MeetingStatus] | None = None,
        reason_code: str | None = None,
    ) -> None:
        self.from_state = from_state
        self.to_state = to_state
        self.allowed_transitions = allowed_transitions or []

        allowed_str = (
            f" Valid transitions: {[s.value for s in self.allowed_transitions]}"
            if self.allowed_transitions
            else ""
        )
        super().__init__(
            f"Invalid meeting transition: {from_state.value} -> {to_state.value}.{allowed_str}",
            reason_code=reason_code,
        )


class MeetingChecklistError(StateGuardError):
    """Raised when a meeting transition is blocked by its readiness checklist.

    Attributes:
        from_state: Current meeting status.
        to_state: Attempted target status.
        issues: Every blocking checklist item.
    """

    reason_code = "checklist_incomplete"

    def __init__(
        self,
        from_state: MeetingStatus,
        to_state: MeetingStatus,
        issues: tuple[TransitionIssue, ...],
    ) -> None:
        self.from_state = from_state
        self.to_state = to_state
        self.issues = issues
        codes = ", ".join(issue.code for issue in issues)
        super().__init__(
            f"Meeting cannot move {from_state.value} -> {to_state.value}: {codes}"
        )
