"""Motion lifecycle state machine.

    pending -> open -> closed

One-directional, no reopening. At most one motion per meeting may be open:
opening a second one fails with a conflict and never closes the first
implicitly. Edits and deletion are allowed only while pending.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

import structlog

from assembly_engine.domain.errors.state_guard import (
    InvalidMotionTransitionError,
    MotionAlreadyOpenError,
    MotionLockedError,
)
from assembly_engine.domain.models.meeting import TransitionCheck, TransitionIssue
from assembly_engine.domain.models.motion import Motion, MotionEdit, MotionStatus

logger = structlog.get_logger(__name__)

MOTION_TRANSITIONS: dict[MotionStatus, frozenset[MotionStatus]] = {
    MotionStatus.PENDING: frozenset({MotionStatus.OPEN}),
    MotionStatus.OPEN: frozenset({MotionStatus.CLOSED}),
    MotionStatus.CLOSED: frozenset(),
}


def _find_open_sibling(motion: Motion, meeting_motions: Iterable[Motion]) -> Motion | None:
    for other in meeting_motions:
        if other.id != motion.id and other.meeting_id == motion.meeting_id and other.is_open:
            return other
    return None


def motion_can_transition(
    motion: Motion,
    target: MotionStatus,
    meeting_motions: Iterable[Motion] = (),
) -> TransitionCheck:
    """Check whether a motion may move to ``target``.

    Args:
        motion: The motion.
        target: Requested status.
        meeting_motions: Other motions of the same meeting, used to enforce
            a single open motion.

    Returns:
        TransitionCheck whose single reason names the blocking fact.
    """
    current = motion.status

    if target not in MOTION_TRANSITIONS[current]:
        if current is target:
            code = f"motion_already_{target.value}"
            message = f"Motion is already {target.value}"
        elif current is MotionStatus.CLOSED:
            code = "motion_closed"
            message = "A closed motion cannot be reopened"
        elif target is MotionStatus.CLOSED:
            code = "motion_not_open"
            message = "Only an open motion can be closed"
        else:
            code = "invalid_motion_transition"
            message = f"Cannot move a motion from {current.value} to {target.value}"
        return TransitionCheck.blocked((TransitionIssue(code, message),))

    if target is MotionStatus.OPEN:
        sibling = _find_open_sibling(motion, meeting_motions)
        if sibling is not None:
            return TransitionCheck.blocked(
                (
                    TransitionIssue(
                        "another_motion_open",
                        f"Motion {sibling.id} is already open in this meeting",
                    ),
                )
            )

    return TransitionCheck.allowed()


class MotionStateMachine:
    """Guards and performs motion lifecycle operations.

    All methods return new Motion values; nothing is mutated.
    """

    can_transition = staticmethod(motion_can_transition)

    @staticmethod
    def open(
        motion: Motion,
        now: datetime,
        meeting_motions: Iterable[Motion] = (),
    ) -> Motion:
        """Open voting on a pending motion.

        Raises:
            MotionAlreadyOpenError: If another motion of the meeting is open.
            InvalidMotionTransitionError: If the motion is not pending.
        """
        siblings = list(meeting_motions)
        check = motion_can_transition(motion, MotionStatus.OPEN, siblings)
        if not check.ok:
            sibling = (
                _find_open_sibling(motion, siblings)
                if check.reason_codes == ("another_motion_open",)
                else None
            )
            if sibling is not None:
                raise MotionAlreadyOpenError(motion.meeting_id, sibling.id)
            raise InvalidMotionTransitionError(motion.id, motion.status, MotionStatus.OPEN)

        logger.debug("motion_opened", motion_id=motion.id, meeting_id=motion.meeting_id)
        return motion.with_opened_at(now)

    @staticmethod
    def close(motion: Motion, now: datetime) -> Motion:
        """Close voting on an open motion.

        Raises:
            InvalidMotionTransitionError: If the motion is not open.
        """
        check = motion_can_transition(motion, MotionStatus.CLOSED)
        if not check.ok:
            raise InvalidMotionTransitionError(motion.id, motion.status, MotionStatus.CLOSED)

        logger.debug("motion_closed", motion_id=motion.id, meeting_id=motion.meeting_id)
        return motion.with_closed_at(now)

    @staticmethod
    def guard_edit(motion: Motion) -> None:
        """Raises MotionLockedError unless the motion is pending."""
        if not motion.is_pending:
            raise MotionLockedError(motion.id, motion.status, "edit")

    @staticmethod
    def guard_delete(motion: Motion) -> None:
        """Raises MotionLockedError unless the motion is pending."""
        if not motion.is_pending:
            raise MotionLockedError(motion.id, motion.status, "delete")

    @classmethod
    def edit(cls, motion: Motion, changes: MotionEdit) -> Motion:
        """Apply an edit to a pending motion.

        Raises:
            MotionLockedError: If the motion is open or closed.
        """
        cls.guard_edit(motion)
        return changes.apply_to(motion)
