"""Decision repository stub.

In-memory implementation of DecisionRepositoryProtocol for development and
tests. Saves overwrite, matching the production contract.

WARNING: This stub is NOT for production use.
"""

from __future__ import annotations

from assembly_engine.application.ports.decision_repository import (
    DecisionRepositoryProtocol,
)
from assembly_engine.domain.models.decision import Decision
from assembly_engine.domain.models.manual_tally import ManualTally


class DecisionRepositoryStub(DecisionRepositoryProtocol):
    """Stub implementation of DecisionRepositoryProtocol.

    Attributes:
        save_count: Number of decision saves, overwrites included.
    """

    def __init__(self) -> None:
        """Initialize the stub with empty storage."""
        self._decisions: dict[str, Decision] = {}
        self._tallies: dict[str, ManualTally] = {}
        self._justifications: dict[str, str] = {}
        self.save_count = 0

    def clear(self) -> None:
        """Clear all stored data."""
        self._decisions.clear()
        self._tallies.clear()
        self._justifications.clear()
        self.save_count = 0

    def add_manual_tally(self, tally: ManualTally, justification: str = "") -> None:
        """Add a manual tally directly to storage for testing."""
        self._tallies[tally.motion_id] = tally
        self._justifications[tally.motion_id] = justification

    def get_justification(self, motion_id: str) -> str | None:
        return self._justifications.get(motion_id)

    async def save_decision(self, decision: Decision) -> None:
        self._decisions[decision.motion_id] = decision
        self.save_count += 1

    async def get_decision(self, motion_id: str) -> Decision | None:
        return self._decisions.get(motion_id)

    async def save_manual_tally(self, tally: ManualTally, justification: str) -> None:
        self._tallies[tally.motion_id] = tally
        self._justifications[tally.motion_id] = justification

    async def get_manual_tally(self, motion_id: str) -> ManualTally | None:
        return self._tallies.get(motion_id)
