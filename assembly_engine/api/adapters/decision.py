"""Decision API adapters.

Adapters to transform domain evaluation results to API responses.
"""

from assembly_engine.api.models.decision import (
    DecisionResponse,
    MajorityResultResponse,
    QuorumBlockResponse,
    QuorumResultResponse,
)
from assembly_engine.domain.models.decision import (
    Decision,
    MajorityResult,
    QuorumBlock,
    QuorumResult,
)


class QuorumResultAdapter:
    """Adapts a domain QuorumResult to its API response."""

    @staticmethod
    def _block(block: QuorumBlock) -> QuorumBlockResponse:
        return QuorumBlockResponse(
            basis=block.basis.value,
            numerator=block.numerator,
            denominator=block.denominator,
            ratio=block.ratio,
            threshold=block.threshold,
            met=block.met,
        )

    @staticmethod
    def to_response(result: QuorumResult) -> QuorumResultResponse:
        return QuorumResultResponse(
            policy_id=result.policy_id,
            mode=result.mode.value,
            convocation_no=result.convocation_no,
            met=result.met,
            ratio=result.ratio,
            ratio2=result.ratio2,
            threshold=result.threshold,
            details=[QuorumResultAdapter._block(block) for block in result.details],
            justification=result.justification,
        )


class MajorityResultAdapter:
    """Adapts a domain MajorityResult to its API response."""

    @staticmethod
    def to_response(result: MajorityResult) -> MajorityResultResponse:
        return MajorityResultResponse(
            policy_id=result.policy_id,
            base=result.base.value,
            met=result.met,
            ratio=result.ratio,
            threshold=result.threshold,
            denominator=result.denominator,
            votes_for=result.votes_for,
            votes_against=result.votes_against,
            votes_abstain=result.votes_abstain,
            effective_against=result.effective_against,
            abstention_as_against=result.abstention_as_against,
        )


class DecisionAdapter:
    """Adapts a domain Decision to its API response.

    Every persisted field is exposed; enums travel as their values.
    """

    @staticmethod
    def to_response(decision: Decision) -> DecisionResponse:
        return DecisionResponse(**decision.to_dict())
