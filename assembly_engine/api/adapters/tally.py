"""Manual tally API adapters."""

from assembly_engine.api.models.tally import ManualTallyResponse, TallyEditRequest
from assembly_engine.domain.models.manual_tally import ManualTally, TallyEdit, TallyField


class ManualTallyAdapter:
    """Converts between manual tally wire models and domain values."""

    @staticmethod
    def to_response(tally: ManualTally) -> ManualTallyResponse:
        return ManualTallyResponse(
            motion_id=tally.motion_id,
            manual_total=tally.manual_total,
            manual_for=tally.manual_for,
            manual_against=tally.manual_against,
            manual_abstain=tally.manual_abstain,
            manual_total_mode=tally.manual_total_mode,
            consistent=tally.is_consistent,
        )

    @staticmethod
    def to_edit(request: TallyEditRequest) -> TallyEdit:
        """Convert an edit request; the raw value is left to the reconciler."""
        return TallyEdit(field=TallyField(request.field), value=request.value)
