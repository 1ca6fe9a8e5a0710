"""Application ports (abstract interfaces to collaborators)."""

from assembly_engine.application.ports.decision_repository import (
    DecisionRepositoryProtocol,
)
from assembly_engine.application.ports.policy_repository import (
    PolicyRepositoryProtocol,
)

__all__: list[str] = [
    "DecisionRepositoryProtocol",
    "PolicyRepositoryProtocol",
]
