"""API models (pydantic)."""

from assembly_engine.api.models.decision import (
    DecisionResponse,
    MajorityResultResponse,
    QuorumBlockResponse,
    QuorumResultResponse,
)
from assembly_engine.api.models.tally import ManualTallyResponse, TallyEditRequest
from assembly_engine.api.models.transition import (
    TransitionCheckResponse,
    TransitionIssueResponse,
)

__all__: list[str] = [
    "DecisionResponse",
    "MajorityResultResponse",
    "ManualTallyResponse",
    "QuorumBlockResponse",
    "QuorumResultResponse",
    "TallyEditRequest",
    "TransitionCheckResponse",
    "TransitionIssueResponse",
]
