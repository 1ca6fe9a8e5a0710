"""Validation errors for tally input and manual (degraded) counting.

Validation errors are local and recoverable: the caller corrects the input
and tries again. The engine never silently fixes input beyond clamping
negative or non-numeric figures to zero.
"""

from __future__ import annotations

from assembly_engine.domain.exceptions import AssemblyError


class ValidationError(AssemblyError):
    """Base class for input validation errors."""

    reason_code = "validation_error"


class TallyValidationError(ValidationError):
    """Raised when a tally fails its save-time checks.

    Reason codes:
        invalid_total: total is zero or negative.
        invalid_numbers: a figure is negative or not an integer.
        vote_exceeds_total: a single category exceeds the total.
        inconsistent_tally: for + against + abstain != total.
        invalid_weight: an attendance weight is negative.

    Attributes:
        field: The offending field, when a single field is at fault.
        detail: Figures that explain the rejection.
    """

    def __init__(
        self,
        reason_code: str,
        message: str,
        field: str | None = None,
        detail: dict[str, int | float] | None = None,
    ) -> None:
        self.field = field
        self.detail = dict(detail or {})
        super().__init__(message, reason_code=reason_code)


class DerivedFieldEditError(ValidationError):
    """Raised when an operator edits a field the engine derives.

    In manual-total mode the ``for`` figure is always computed from
    ``total - (against + abstain)``; a direct edit is not applied.

    Attributes:
        field: The rejected field.
    """

    reason_code = "derived_field"

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(
            f"Edit of '{field}' not applied: in manual-total mode it is "
            "derived from total - (against + abstain)"
        )


class MissingJustificationError(ValidationError):
    """Raised when a degraded tally is saved without a justification."""

    reason_code = "missing_justification"

    def __init__(self, motion_id: str) -> None:
        self.motion_id = motion_id
        super().__init__(
            f"A justification is required to save a manual tally for motion {motion_id}"
        )


class MissingAggregateError(ValidationError):
    """Raised when an evaluator needs a figure the caller did not supply.

    Attributes:
        field: The missing aggregate (e.g. "eligible", "present").
    """

    reason_code = "missing_aggregate"

    def __init__(self, field: str, base: str) -> None:
        self.field = field
        self.base = base
        super().__init__(
            f"Majority base '{base}' requires the '{field}' total to be supplied"
        )
