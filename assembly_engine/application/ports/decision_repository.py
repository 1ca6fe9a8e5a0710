"""Decision and manual tally repository port.

This module defines the abstract interface for storing the engine's
outputs. Both records are overwritten on every save: a Decision is an
idempotent recomputation, not an append-only log.

The caller serializes writes per motion (row lock or version check in the
implementation); the engine performs no locking itself.
"""

from __future__ import annotations

from typing import Protocol

from assembly_engine.domain.models.decision import Decision
from assembly_engine.domain.models.manual_tally import ManualTally


class DecisionRepositoryProtocol(Protocol):
    """Protocol for decision and manual tally storage.

    Methods:
        save_decision: Store (overwrite) the decision of a motion
        get_decision: Get the stored decision of a motion
        save_manual_tally: Store (overwrite) the manual tally of a motion
        get_manual_tally: Get the stored manual tally of a motion
    """

    async def save_decision(self, decision: Decision) -> None:
        """Store a decision, replacing any previous one for the motion."""
        ...

    async def get_decision(self, motion_id: str) -> Decision | None:
        """Get the decision of a motion, None if never consolidated."""
        ...

    async def save_manual_tally(self, tally: ManualTally, justification: str) -> None:
        """Store a manual tally, replacing any previous one for the motion.

        Args:
            tally: Validated manual tally.
            justification: Operator's reason for the degraded count.
        """
        ...

    async def get_manual_tally(self, motion_id: str) -> ManualTally | None:
        """Get the manual tally of a motion, None if none was saved."""
        ...
