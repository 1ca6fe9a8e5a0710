"""Meeting lifecycle state machine.

Transitions and the readiness facts each forward move requires:

    draft     -> scheduled : members on the roster, motions created
    scheduled -> frozen    : attendance recorded, policies assigned
                             (warns when no president is designated)
    frozen    -> live      : nothing (warns when quorum is known not met)
    live      -> closed    : no motion left open
    closed    -> validated : every closed motion has a usable result
                             (warns when results are not consolidated)
    validated -> archived  : nothing

Backward moves (scheduled -> draft, frozen -> scheduled) need no checklist.
Nothing leaves archived. Who may trigger a transition is the caller's
concern.
"""

from __future__ import annotations

import structlog

from assembly_engine.domain.errors.state_guard import (
    InvalidMeetingTransitionError,
    MeetingChecklistError,
)
from assembly_engine.domain.models.meeting import (
    MEETING_STATUS_ORDER,
    Meeting,
    MeetingChecklist,
    MeetingStatus,
    TransitionCheck,
    TransitionIssue,
)

logger = structlog.get_logger(__name__)


def _is_forward(current: MeetingStatus, target: MeetingStatus) -> bool:
    return MEETING_STATUS_ORDER.index(target) > MEETING_STATUS_ORDER.index(current)


def _blocking_issues(
    current: MeetingStatus, target: MeetingStatus, checklist: MeetingChecklist
) -> list[TransitionIssue]:
    issues: list[TransitionIssue] = []
    move = (current, target)

    if move == (MeetingStatus.DRAFT, MeetingStatus.SCHEDULED):
        if not checklist.has_members:
            issues.append(TransitionIssue("no_members", "The member roster is empty"))
        if not checklist.has_motions:
            issues.append(TransitionIssue("no_motions", "No motion has been created"))

    elif move == (MeetingStatus.SCHEDULED, MeetingStatus.FROZEN):
        if not checklist.has_attendance:
            issues.append(TransitionIssue("no_attendance", "No attendance has been recorded"))
        if not checklist.policies_assigned:
            issues.append(
                TransitionIssue("no_policies", "Quorum and vote policies are not assigned")
            )

    elif move == (MeetingStatus.LIVE, MeetingStatus.CLOSED):
        if checklist.open_motions > 0:
            issues.append(
                TransitionIssue(
                    "motion_open",
                    f"{checklist.open_motions} motion(s) still open",
                )
            )

    elif move == (MeetingStatus.CLOSED, MeetingStatus.VALIDATED):
        if checklist.undecided_motions > 0:
            issues.append(
                TransitionIssue(
                    "bad_results",
                    f"{checklist.undecided_motions} motion(s) without a usable result",
                )
            )

    return issues


def _warnings(
    current: MeetingStatus, target: MeetingStatus, checklist: MeetingChecklist
) -> list[TransitionIssue]:
    warnings: list[TransitionIssue] = []
    move = (current, target)

    if move == (MeetingStatus.SCHEDULED, MeetingStatus.FROZEN) and not checklist.has_president:
        warnings.append(
            TransitionIssue("no_president", "No president has been designated (optional)")
        )
    if move == (MeetingStatus.FROZEN, MeetingStatus.LIVE) and checklist.quorum_met is False:
        warnings.append(
            TransitionIssue("quorum_not_met", "Quorum is not met (the meeting may still start)")
        )
    if (
        move == (MeetingStatus.CLOSED, MeetingStatus.VALIDATED)
        and checklist.all_consolidated is False
    ):
        warnings.append(
            TransitionIssue("not_consolidated", "Results are not consolidated")
        )
    return warnings


def meeting_status_can_transition(
    current: MeetingStatus,
    target: MeetingStatus,
    checklist: MeetingChecklist,
) -> TransitionCheck:
    """Pure transition predicate on statuses.

    Args:
        current: Current meeting status.
        target: Requested status.
        checklist: Readiness facts gathered by the caller.

    Returns:
        TransitionCheck listing every blocking reason and warning.
    """
    if current is MeetingStatus.ARCHIVED:
        return TransitionCheck.blocked(
            (
                TransitionIssue(
                    "archived_immutable",
                    "An archived meeting cannot change status",
                ),
            )
        )

    if target not in current.valid_transitions():
        allowed = sorted(s.value for s in current.valid_transitions())
        return TransitionCheck.blocked(
            (
                TransitionIssue(
                    "invalid_transition",
                    f"Cannot move from {current.value} to {target.value}; "
                    f"allowed: {allowed}",
                ),
            )
        )

    if not _is_forward(current, target):
        return TransitionCheck.allowed()

    issues = tuple(_blocking_issues(current, target, checklist))
    warnings = tuple(_warnings(current, target, checklist))
    if issues:
        return TransitionCheck.blocked(issues, warnings)
    return TransitionCheck.allowed(warnings)


def meeting_can_transition(
    meeting: Meeting,
    target: MeetingStatus,
    checklist: MeetingChecklist,
) -> TransitionCheck:
    """Transition predicate for a meeting value."""
    return meeting_status_can_transition(meeting.status, target, checklist)


def available_meeting_transitions(
    current: MeetingStatus, checklist: MeetingChecklist
) -> dict[MeetingStatus, TransitionCheck]:
    """Readiness of every transition out of ``current``.

    Returns:
        Mapping of each reachable status to its TransitionCheck, in
        lifecycle order.
    """
    return {
        target: meeting_status_can_transition(current, target, checklist)
        for target in MEETING_STATUS_ORDER
        if target in current.valid_transitions()
    }


class MeetingStateMachine:
    """Guards and performs meeting status transitions."""

    can_transition = staticmethod(meeting_status_can_transition)
    available_transitions = staticmethod(available_meeting_transitions)

    @staticmethod
    def transition(
        meeting: Meeting,
        target: MeetingStatus,
        checklist: MeetingChecklist,
    ) -> Meeting:
        """Move a meeting to ``target`` after checking the guards.

        Returns:
            The meeting in its new status.

        Raises:
            InvalidMeetingTransitionError: If the transition is not adjacent
                or leaves archived.
            MeetingChecklistError: If a required checklist item is missing.
        """
        check = meeting_status_can_transition(meeting.status, target, checklist)
        if not check.ok:
            if check.reason_codes in (("invalid_transition",), ("archived_immutable",)):
                raise InvalidMeetingTransitionError(
                    meeting.status,
                    target,
                    sorted(meeting.status.valid_transitions(), key=MEETING_STATUS_ORDER.index),
                    reason_code=(
                        "archived_immutable"
                        if meeting.status is MeetingStatus.ARCHIVED
                        else None
                    ),
                )
            raise MeetingChecklistError(meeting.status, target, check.reasons)

        logger.debug(
            "meeting_transitioned",
            meeting_id=meeting.id,
            from_status=meeting.status.value,
            to_status=target.value,
            warnings=[w.code for w in check.warnings],
        )
        return meeting.with_status(target)
