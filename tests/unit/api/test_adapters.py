"""Unit tests for API models and adapters."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from assembly_engine.api.adapters import (
    DecisionAdapter,
    MajorityResultAdapter,
    ManualTallyAdapter,
    QuorumResultAdapter,
    TransitionCheckAdapter,
)
from assembly_engine.api.models import TallyEditRequest
from assembly_engine.domain.models.attendance import AttendanceAggregate
from assembly_engine.domain.models.ballot import TallyAggregate
from assembly_engine.domain.models.manual_tally import ManualTally, TallyField
from assembly_engine.domain.models.meeting import MeetingChecklist, MeetingStatus
from assembly_engine.domain.models.policy import (
    QuorumBasis,
    QuorumMode,
    QuorumPolicy,
    VotePolicy,
)
from assembly_engine.domain.services.decision_consolidator import consolidate
from assembly_engine.domain.services.majority_evaluator import evaluate_majority
from assembly_engine.domain.services.meeting_state_machine import (
    available_meeting_transitions,
    meeting_status_can_transition,
)
from assembly_engine.domain.services.quorum_evaluator import evaluate_quorum
from assembly_engine.domain.services.tally_reconciler import reconcile_tally

ATTENDANCE = AttendanceAggregate(
    present_count=6, present_weight=40, eligible_count=10, eligible_weight=100
)


class TestDecisionAdapters:
    """Tests for quorum, majority and decision responses."""

    def test_double_quorum_response(self) -> None:
        """Both conditions are exposed with their ratios."""
        policy = QuorumPolicy(
            id="q-double",
            name="Double",
            mode=QuorumMode.DOUBLE,
            denominator=QuorumBasis.ELIGIBLE_MEMBERS,
            threshold=0.5,
            denominator2=QuorumBasis.ELIGIBLE_WEIGHT,
            threshold2=0.5,
        )

        response = QuorumResultAdapter.to_response(evaluate_quorum(policy, ATTENDANCE))

        assert response.mode == "double"
        assert response.met is False
        assert response.ratio2 == pytest.approx(0.4)
        assert [block.basis for block in response.details] == [
            "eligible_members",
            "eligible_weight",
        ]

    def test_majority_response(self, simple_majority: VotePolicy) -> None:
        """Raw and effective figures are exposed."""
        response = MajorityResultAdapter.to_response(
            evaluate_majority(simple_majority, TallyAggregate(10, 5, 3))
        )

        assert response.base == "expressed"
        assert response.denominator == 15
        assert response.votes_abstain == 3
        assert response.met is True

    def test_decision_response_serializes(
        self, half_weight_quorum: QuorumPolicy, simple_majority: VotePolicy
    ) -> None:
        """Every decision field travels, enums as values."""
        decision = consolidate(
            evaluate_quorum(half_weight_quorum, ATTENDANCE),
            evaluate_majority(simple_majority, TallyAggregate(10, 5, 3)),
            motion_id="r1",
        )

        response = DecisionAdapter.to_response(decision)
        payload = response.model_dump()

        assert payload["status"] == "undecided"
        assert payload["reason"] == "quorum_not_met"
        assert payload["source"] == "ballots"
        assert payload["explanation"] == decision.explanation
        assert payload["quorum_ratio2"] is None


class TestManualTallyAdapter:
    """Tests for manual tally conversion."""

    def test_request_to_edit(self) -> None:
        """The edit request becomes a domain edit with the raw value."""
        edit = ManualTallyAdapter.to_edit(TallyEditRequest(field="against", value="10"))

        assert edit.field is TallyField.AGAINST
        assert edit.value == "10"

    def test_unknown_field_rejected(self) -> None:
        """Only the four tally fields can be edited."""
        with pytest.raises(PydanticValidationError):
            TallyEditRequest(field="quorum", value=1)

    def test_response_reports_consistency(self) -> None:
        """The response tells whether the draft would pass save validation."""
        draft = ManualTally(motion_id="r1")
        edit = ManualTallyAdapter.to_edit(TallyEditRequest(field="total", value=12))

        response = ManualTallyAdapter.to_response(reconcile_tally(draft, edit))

        assert response.manual_total == 12
        assert response.manual_for == 12
        assert response.manual_total_mode is True
        assert response.consistent is True

    def test_empty_draft_not_consistent(self) -> None:
        """A zero total is not a savable tally."""
        response = ManualTallyAdapter.to_response(ManualTally(motion_id="r1"))

        assert response.consistent is False


class TestTransitionCheckAdapter:
    """Tests for transition check responses."""

    def test_blocked_meeting_transition(self) -> None:
        """Reasons and warnings are listed with their codes."""
        check = meeting_status_can_transition(
            MeetingStatus.CLOSED,
            MeetingStatus.VALIDATED,
            MeetingChecklist(undecided_motions=1, all_consolidated=False),
        )

        response = TransitionCheckAdapter.to_response(MeetingStatus.VALIDATED, check)

        assert response.target == "validated"
        assert response.ok is False
        assert [r.code for r in response.reasons] == ["bad_results"]
        assert [w.code for w in response.warnings] == ["not_consolidated"]

    def test_available_transitions(self) -> None:
        """Every reachable status is reported in lifecycle order."""
        responses = TransitionCheckAdapter.to_responses(
            available_meeting_transitions(MeetingStatus.FROZEN, MeetingChecklist())
        )

        assert [r.target for r in responses] == ["scheduled", "live"]
        assert all(r.ok for r in responses)
