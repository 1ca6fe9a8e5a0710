"""Manual tally reconciliation domain service.

Two editing modes, tracked by ``ManualTally.manual_total_mode``:

Auto-sum mode (manual_total_mode False):
- editing for, against or abstain recomputes total = for + against + abstain
- editing total switches to manual-total mode and applies the new total
  under manual-total rules

Manual-total mode (manual_total_mode True):
- total is operator-fixed; for = max(0, total - (against + abstain))
- when against + abstain exceeds total, the most recently edited of the
  two is clamped down first
- a direct edit of for is rejected with DerivedFieldEditError

Every figure is clamped to >= 0 at every step and non-numeric input
normalizes to 0. Reconciliation never persists anything: callers run
validate_manual_tally before saving.
"""

from __future__ import annotations

import math
import re
from dataclasses import replace
from typing import Any

import structlog

from assembly_engine.domain.errors.validation import (
    DerivedFieldEditError,
    TallyValidationError,
)
from assembly_engine.domain.models.manual_tally import ManualTally, TallyEdit, TallyField

logger = structlog.get_logger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def coerce_count(value: Any) -> int:
    """Normalize raw operator input to a non-negative integer.

    Integers pass through, floats are truncated, strings are read up to
    their first non-digit. Negative results clamp to 0; anything else
    (None, booleans, NaN, unparsable text) becomes 0.

    Args:
        value: Raw input.

    Returns:
        A non-negative integer.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return max(0, value)
    if isinstance(value, float):
        if not math.isfinite(value):
            return 0
        return max(0, int(value))
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match is None:
            return 0
        return max(0, int(match.group(1)))
    return 0


def _clamp_to_total(
    total: int, against: int, abstain: int, last_edited: TallyField | None
) -> tuple[int, int]:
    """Reduce against/abstain until their sum fits within total."""
    figures = {TallyField.AGAINST: against, TallyField.ABSTAIN: abstain}
    first = last_edited if last_edited in figures else TallyField.ABSTAIN
    order = [first] + [field for field in figures if field is not first]

    for field in order:
        excess = sum(figures.values()) - total
        if excess <= 0:
            break
        figures[field] -= min(figures[field], excess)

    return figures[TallyField.AGAINST], figures[TallyField.ABSTAIN]


def _derive_manual(tally: ManualTally, total: int, against: int, abstain: int) -> ManualTally:
    against, abstain = _clamp_to_total(total, against, abstain, tally.last_edited)
    return tally.with_figures(
        total=total,
        for_=max(0, total - (against + abstain)),
        against=against,
        abstain=abstain,
    )


def reconcile_tally(current: ManualTally, edit: TallyEdit) -> ManualTally:
    """Apply one operator edit and return the normalized tally.

    Args:
        current: Tally before the edit, with its editor state.
        edit: Field edited and its raw new value.

    Returns:
        The reconciled tally, mode and last_edited updated.

    Raises:
        DerivedFieldEditError: If ``for`` is edited in manual-total mode.
    """
    value = coerce_count(edit.value)
    total = max(0, current.manual_total)
    for_ = max(0, current.manual_for)
    against = max(0, current.manual_against)
    abstain = max(0, current.manual_abstain)

    if edit.field is TallyField.TOTAL:
        if not current.manual_total_mode:
            logger.debug("manual_total_mode_entered", motion_id=current.motion_id)
        switched = replace(current, manual_total_mode=True)
        result = _derive_manual(switched, value, against, abstain)

    elif edit.field is TallyField.FOR:
        if current.manual_total_mode:
            logger.debug("derived_field_edit_rejected", motion_id=current.motion_id)
            raise DerivedFieldEditError(TallyField.FOR.value)
        result = current.with_figures(
            total=value + against + abstain,
            for_=value,
            against=against,
            abstain=abstain,
        )

    else:
        if edit.field is TallyField.AGAINST:
            against = value
        else:
            abstain = value
        edited = replace(current, last_edited=edit.field)
        if current.manual_total_mode:
            result = _derive_manual(edited, total, against, abstain)
        else:
            result = edited.with_figures(
                total=for_ + against + abstain,
                for_=for_,
                against=against,
                abstain=abstain,
            )

    logger.debug(
        "tally_reconciled",
        motion_id=current.motion_id,
        field=edit.field.value,
        manual_total_mode=result.manual_total_mode,
        total=result.manual_total,
        sum=result.sum,
    )
    return result


def set_manual_total_mode(current: ManualTally, enabled: bool) -> ManualTally:
    """Explicitly switch the editing mode.

    Entering manual-total mode keeps the current total (or adopts the
    current sum when no total was entered) and derives ``for`` from it.
    Leaving it recomputes the total as the sum of the three figures.

    Args:
        current: Tally before the switch.
        enabled: Target mode.

    Returns:
        The tally in the requested mode.
    """
    if current.manual_total_mode == enabled:
        return current

    against = max(0, current.manual_against)
    abstain = max(0, current.manual_abstain)
    switched = replace(current, manual_total_mode=enabled)

    if enabled:
        total = max(0, current.manual_total) or current.sum
        return _derive_manual(switched, total, against, abstain)

    for_ = max(0, current.manual_for)
    return switched.with_figures(
        total=for_ + against + abstain, for_=for_, against=against, abstain=abstain
    )


def apply_unanimity(current: ManualTally) -> ManualTally:
    """Record a unanimous vote for the motion.

    Sets against and abstain to 0 and for to the current total, or to the
    sum of the current figures when no total is set. The mode is kept.

    Args:
        current: Tally before the shortcut.

    Returns:
        The unanimous tally.
    """
    base = max(0, current.manual_total) or max(0, current.sum)
    return current.with_figures(total=base, for_=base, against=0, abstain=0)


def validate_manual_tally(tally: ManualTally) -> None:
    """Save-time guard, applied in both modes.

    Raises:
        TallyValidationError: With reason code
            - invalid_numbers: a figure is not an integer or is negative
            - invalid_total: total <= 0
            - vote_exceeds_total: one category exceeds the total
            - inconsistent_tally: for + against + abstain != total
    """
    figures = {
        "total": tally.manual_total,
        "for": tally.manual_for,
        "against": tally.manual_against,
        "abstain": tally.manual_abstain,
    }

    for name, value in figures.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise TallyValidationError(
                "invalid_numbers",
                f"Tally figure '{name}' must be an integer, got {value!r}",
                field=name,
            )

    if tally.manual_total <= 0:
        raise TallyValidationError(
            "invalid_total",
            "The total number of voters must be strictly positive",
            field="total",
            detail={"total": tally.manual_total},
        )

    for name, value in figures.items():
        if value < 0:
            raise TallyValidationError(
                "invalid_numbers",
                f"Tally figure '{name}' must be non-negative, got {value}",
                field=name,
                detail={name: value},
            )

    for name in ("for", "against", "abstain"):
        if figures[name] > tally.manual_total:
            raise TallyValidationError(
                "vote_exceeds_total",
                f"'{name}' ({figures[name]}) exceeds the total ({tally.manual_total})",
                field=name,
                detail=dict(figures),
            )

    if tally.sum != tally.manual_total:
        raise TallyValidationError(
            "inconsistent_tally",
            f"for + against + abstain ({tally.sum}) must equal the total "
            f"({tally.manual_total})",
            detail={"total": tally.manual_total, "sum": tally.sum},
        )


class TallyReconciler:
    """Object facade over the reconciliation functions."""

    def reconcile(
        self, current: ManualTally, field: TallyField, value: Any
    ) -> ManualTally:
        return reconcile_tally(current, TallyEdit(field=field, value=value))

    def validate(self, tally: ManualTally) -> None:
        validate_manual_tally(tally)

    def unanimity(self, current: ManualTally) -> ManualTally:
        return apply_unanimity(current)

    def set_mode(self, current: ManualTally, manual_total_mode: bool) -> ManualTally:
        return set_manual_total_mode(current, manual_total_mode)
