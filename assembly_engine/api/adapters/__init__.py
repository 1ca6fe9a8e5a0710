"""API adapters from domain values to wire models."""

from assembly_engine.api.adapters.decision import (
    DecisionAdapter,
    MajorityResultAdapter,
    QuorumResultAdapter,
)
from assembly_engine.api.adapters.tally import ManualTallyAdapter
from assembly_engine.api.adapters.transition import TransitionCheckAdapter

__all__: list[str] = [
    "DecisionAdapter",
    "MajorityResultAdapter",
    "ManualTallyAdapter",
    "QuorumResultAdapter",
    "TransitionCheckAdapter",
]
