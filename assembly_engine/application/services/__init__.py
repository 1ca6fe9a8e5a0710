"""Application services."""

from assembly_engine.application.services.governance_decision_service import (
    GovernanceDecisionService,
)

__all__: list[str] = [
    "GovernanceDecisionService",
]
