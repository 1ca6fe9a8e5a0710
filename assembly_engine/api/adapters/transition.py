"""Lifecycle transition API adapters."""

from enum import Enum

from assembly_engine.api.models.transition import (
    TransitionCheckResponse,
    TransitionIssueResponse,
)
from assembly_engine.domain.models.meeting import (
    MeetingStatus,
    TransitionCheck,
    TransitionIssue,
)


def _issue(issue: TransitionIssue) -> TransitionIssueResponse:
    return TransitionIssueResponse(code=issue.code, message=issue.message)


class TransitionCheckAdapter:
    """Adapts a TransitionCheck (motion or meeting) to its API response."""

    @staticmethod
    def to_response(target: Enum, check: TransitionCheck) -> TransitionCheckResponse:
        """Convert a check made for ``target`` (a MotionStatus or MeetingStatus)."""
        return TransitionCheckResponse(
            target=target.value,
            ok=check.ok,
            reasons=[_issue(issue) for issue in check.reasons],
            warnings=[_issue(issue) for issue in check.warnings],
        )

    @staticmethod
    def to_responses(
        checks: dict[MeetingStatus, TransitionCheck],
    ) -> list[TransitionCheckResponse]:
        """Convert the output of available_meeting_transitions, order kept."""
        return [
            TransitionCheckAdapter.to_response(target, check)
            for target, check in checks.items()
        ]
