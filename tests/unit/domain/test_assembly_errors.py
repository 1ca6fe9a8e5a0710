"""Unit tests for the domain error hierarchy."""

import pytest

from assembly_engine.domain import (
    AssemblyError,
    ConfigurationError,
    StateGuardError,
    ValidationError,
)
from assembly_engine.domain.errors import (
    DerivedFieldEditError,
    InvalidMeetingTransitionError,
    InvalidMotionTransitionError,
    MalformedPolicyError,
    MeetingChecklistError,
    MissingAggregateError,
    MissingJustificationError,
    MotionAlreadyOpenError,
    MotionLockedError,
    PolicyNotConfiguredError,
    PolicyNotFoundError,
    TallyValidationError,
)
from assembly_engine.domain.models.meeting import MeetingStatus, TransitionIssue
from assembly_engine.domain.models.motion import MotionStatus


class TestHierarchy:
    """Every error belongs to exactly one family under AssemblyError."""

    @pytest.mark.parametrize(
        ("error_cls", "family"),
        [
            (PolicyNotConfiguredError, ConfigurationError),
            (PolicyNotFoundError, ConfigurationError),
            (MalformedPolicyError, ConfigurationError),
            (TallyValidationError, ValidationError),
            (DerivedFieldEditError, ValidationError),
            (MissingJustificationError, ValidationError),
            (MissingAggregateError, ValidationError),
            (MotionLockedError, StateGuardError),
            (MotionAlreadyOpenError, StateGuardError),
            (InvalidMotionTransitionError, StateGuardError),
            (InvalidMeetingTransitionError, StateGuardError),
            (MeetingChecklistError, StateGuardError),
        ],
    )
    def test_family(self, error_cls: type[AssemblyError], family: type[AssemblyError]) -> None:
        """Each concrete error subclasses its family and the root."""
        assert issubclass(error_cls, family)
        assert issubclass(error_cls, AssemblyError)


class TestReasonCodes:
    """Tests for machine-readable reason codes and attributes."""

    def test_default_and_override(self) -> None:
        """The class code applies unless the instance overrides it."""
        assert AssemblyError("x").reason_code == "assembly_error"
        assert StateGuardError("x", reason_code="motion_not_opened").reason_code == (
            "motion_not_opened"
        )

    def test_policy_not_found_carries_id(self) -> None:
        """The missing policy id is exposed."""
        error = PolicyNotFoundError("vote", "v9")

        assert error.policy_id == "v9"
        assert error.reason_code == "policy_not_found"
        assert "v9" in str(error)

    def test_motion_transition_codes(self) -> None:
        """Same-state transitions get a motion_already_* code."""
        already = InvalidMotionTransitionError("r1", MotionStatus.OPEN, MotionStatus.OPEN)
        invalid = InvalidMotionTransitionError(
            "r1", MotionStatus.CLOSED, MotionStatus.OPEN
        )

        assert already.reason_code == "motion_already_open"
        assert invalid.reason_code == "invalid_motion_transition"

    def test_checklist_error_message_lists_codes(self) -> None:
        """The message names every blocking item."""
        error = MeetingChecklistError(
            MeetingStatus.DRAFT,
            MeetingStatus.SCHEDULED,
            (
                TransitionIssue("no_members", "empty roster"),
                TransitionIssue("no_motions", "no motion"),
            ),
        )

        assert "no_members, no_motions" in str(error)

    def test_missing_justification(self) -> None:
        """The motion id is exposed."""
        error = MissingJustificationError("r1")

        assert error.motion_id == "r1"
        assert error.reason_code == "missing_justification"
