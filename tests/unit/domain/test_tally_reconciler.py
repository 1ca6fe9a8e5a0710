"""Unit tests for manual tally reconciliation and save-time validation."""

import pytest

from assembly_engine.domain.errors import DerivedFieldEditError, TallyValidationError
from assembly_engine.domain.models.manual_tally import ManualTally, TallyEdit, TallyField
from assembly_engine.domain.services.tally_reconciler import (
    TallyReconciler,
    apply_unanimity,
    coerce_count,
    reconcile_tally,
    set_manual_total_mode,
    validate_manual_tally,
)


def _edit(tally: ManualTally, field: TallyField, value: object) -> ManualTally:
    return reconcile_tally(tally, TallyEdit(field=field, value=value))


def _figures(tally: ManualTally) -> tuple[int, int, int, int]:
    return (
        tally.manual_total,
        tally.manual_for,
        tally.manual_against,
        tally.manual_abstain,
    )


class TestCoerceCount:
    """Tests for raw input normalization."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (7, 7),
            (-3, 0),
            (3.9, 3),
            ("12", 12),
            ("12 votes", 12),
            ("-4", 0),
            ("abc", 0),
            ("", 0),
            (None, 0),
            (True, 0),
            (float("nan"), 0),
            ([1, 2], 0),
        ],
    )
    def test_normalizes_to_non_negative_int(self, raw: object, expected: int) -> None:
        """Any input becomes a non-negative integer."""
        assert coerce_count(raw) == expected


class TestManualTotalMode:
    """Tests for editing with an operator-fixed total."""

    def test_for_derived_from_total(self) -> None:
        """total=50, against=10, abstain=5 derives for=35."""
        tally = ManualTally(motion_id="r1")

        tally = _edit(tally, TallyField.TOTAL, 50)
        tally = _edit(tally, TallyField.AGAINST, 10)
        tally = _edit(tally, TallyField.ABSTAIN, 5)

        assert tally.manual_total_mode is True
        assert _figures(tally) == (50, 35, 10, 5)
        assert tally.sum == 50

    def test_editing_for_rejected(self) -> None:
        """for is derived in manual-total mode and cannot be edited."""
        tally = _edit(ManualTally(motion_id="r1"), TallyField.TOTAL, 20)

        with pytest.raises(DerivedFieldEditError) as exc_info:
            _edit(tally, TallyField.FOR, 5)

        assert exc_info.value.field == "for"
        assert exc_info.value.reason_code == "derived_field"

    def test_last_edited_field_clamped_first(self) -> None:
        """Overflow is taken from the field just edited."""
        tally = _edit(ManualTally(motion_id="r1"), TallyField.TOTAL, 10)
        tally = _edit(tally, TallyField.AGAINST, 6)
        tally = _edit(tally, TallyField.ABSTAIN, 8)

        assert _figures(tally) == (10, 0, 6, 4)

    def test_against_clamped_when_edited_last(self) -> None:
        """Editing against past the remaining room clamps against."""
        tally = _edit(ManualTally(motion_id="r1"), TallyField.TOTAL, 10)
        tally = _edit(tally, TallyField.ABSTAIN, 6)
        tally = _edit(tally, TallyField.AGAINST, 8)

        assert _figures(tally) == (10, 0, 4, 6)

    def test_lowering_total_clamps_existing_figures(self) -> None:
        """A smaller total reduces the most recently edited figure first."""
        tally = _edit(ManualTally(motion_id="r1"), TallyField.TOTAL, 20)
        tally = _edit(tally, TallyField.AGAINST, 8)
        tally = _edit(tally, TallyField.ABSTAIN, 4)
        tally = _edit(tally, TallyField.TOTAL, 10)

        assert _figures(tally) == (10, 0, 8, 2)

    def test_garbage_input_treated_as_zero(self) -> None:
        """Unparsable input becomes 0 rather than an error."""
        tally = _edit(ManualTally(motion_id="r1"), TallyField.TOTAL, "forty")

        assert _figures(tally) == (0, 0, 0, 0)


class TestAutomaticTotalMode:
    """Tests for editing where the total follows the sum."""

    def test_total_is_sum(self) -> None:
        """Each edit recomputes the total."""
        tally = ManualTally(motion_id="r1")

        tally = _edit(tally, TallyField.FOR, 7)
        tally = _edit(tally, TallyField.AGAINST, "3")
        tally = _edit(tally, TallyField.ABSTAIN, 2.0)

        assert tally.manual_total_mode is False
        assert _figures(tally) == (12, 7, 3, 2)

    def test_total_edit_switches_mode(self) -> None:
        """Editing the total enters manual-total mode."""
        tally = _edit(ManualTally(motion_id="r1"), TallyField.FOR, 7)

        tally = _edit(tally, TallyField.TOTAL, 9)

        assert tally.manual_total_mode is True
        assert _figures(tally) == (9, 9, 0, 0)


class TestModeSwitch:
    """Tests for set_manual_total_mode."""

    def test_enabling_keeps_sum_as_total(self) -> None:
        """With no total yet, the current sum becomes the fixed total."""
        tally = ManualTally(motion_id="r1", manual_for=3, manual_against=2)

        switched = set_manual_total_mode(tally, True)

        assert switched.manual_total_mode is True
        assert _figures(switched) == (5, 3, 2, 0)

    def test_disabling_recomputes_total(self) -> None:
        """Leaving manual-total mode makes the total the sum again."""
        tally = ManualTally(
            motion_id="r1",
            manual_total=50,
            manual_for=35,
            manual_against=10,
            manual_abstain=0,
            manual_total_mode=True,
        )

        switched = set_manual_total_mode(tally, False)

        assert switched.manual_total_mode is False
        assert switched.manual_total == 45

    def test_same_mode_is_noop(self) -> None:
        """Requesting the current mode returns the tally unchanged."""
        tally = ManualTally(motion_id="r1", manual_for=1, manual_total=1)

        assert set_manual_total_mode(tally, False) is tally


class TestUnanimity:
    """Tests for apply_unanimity."""

    def test_unanimity_uses_total(self) -> None:
        """total=20 gives for=20 and nothing else; save validates."""
        tally = ManualTally(
            motion_id="r1", manual_total=20, manual_against=3, manual_total_mode=True
        )

        result = apply_unanimity(tally)

        assert _figures(result) == (20, 20, 0, 0)
        assert result.manual_total_mode is True
        validate_manual_tally(result)

    def test_unanimity_without_total_uses_sum(self) -> None:
        """Without a total, the current sum is the base."""
        tally = ManualTally(motion_id="r1", manual_for=4, manual_against=2)

        assert _figures(apply_unanimity(tally)) == (6, 6, 0, 0)


class TestValidateManualTally:
    """Tests for save-time validation."""

    def test_consistent_tally_passes(self) -> None:
        """sum == total and total > 0 is accepted."""
        validate_manual_tally(
            ManualTally(
                motion_id="r1",
                manual_total=50,
                manual_for=35,
                manual_against=10,
                manual_abstain=5,
            )
        )

    def test_sum_mismatch_rejected(self) -> None:
        """total=50 with 30/10/5 sums to 45 and is rejected."""
        tally = ManualTally(
            motion_id="r1",
            manual_total=50,
            manual_for=30,
            manual_against=10,
            manual_abstain=5,
        )

        with pytest.raises(TallyValidationError) as exc_info:
            validate_manual_tally(tally)

        assert exc_info.value.reason_code == "inconsistent_tally"
        assert exc_info.value.detail == {"total": 50, "sum": 45}

    def test_zero_total_rejected(self) -> None:
        """A tally must count at least one voter."""
        with pytest.raises(TallyValidationError) as exc_info:
            validate_manual_tally(ManualTally(motion_id="r1"))

        assert exc_info.value.reason_code == "invalid_total"

    def test_negative_figure_rejected(self) -> None:
        """Negative figures are invalid numbers."""
        tally = ManualTally(
            motion_id="r1", manual_total=5, manual_for=6, manual_against=-1
        )

        with pytest.raises(TallyValidationError) as exc_info:
            validate_manual_tally(tally)

        assert exc_info.value.reason_code == "invalid_numbers"
        assert exc_info.value.field == "against"

    def test_non_integer_rejected(self) -> None:
        """Non-integer figures are invalid numbers."""
        tally = ManualTally(motion_id="r1", manual_total=5, manual_for=2.5)  # type: ignore[arg-type]

        with pytest.raises(TallyValidationError) as exc_info:
            validate_manual_tally(tally)

        assert exc_info.value.reason_code == "invalid_numbers"

    def test_category_above_total_rejected(self) -> None:
        """One category larger than the total is reported as such."""
        tally = ManualTally(
            motion_id="r1", manual_total=5, manual_for=0, manual_against=6
        )

        with pytest.raises(TallyValidationError) as exc_info:
            validate_manual_tally(tally)

        assert exc_info.value.reason_code == "vote_exceeds_total"
        assert exc_info.value.field == "against"


class TestTallyReconcilerFacade:
    """Tests for the object facade."""

    def test_facade_delegates(self) -> None:
        """The facade runs the same rules as the functions."""
        reconciler = TallyReconciler()

        tally = reconciler.reconcile(ManualTally(motion_id="r1"), TallyField.TOTAL, 8)
        tally = reconciler.reconcile(tally, TallyField.ABSTAIN, 2)
        reconciler.validate(tally)

        assert _figures(tally) == (8, 6, 0, 2)
        assert _figures(reconciler.unanimity(tally)) == (8, 8, 0, 0)
        assert reconciler.set_mode(tally, False).manual_total == 8
