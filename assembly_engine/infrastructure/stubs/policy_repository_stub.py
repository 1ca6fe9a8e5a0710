"""Policy repository stub.

In-memory implementation of PolicyRepositoryProtocol for development and
tests.

WARNING: This stub is NOT for production use.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from assembly_engine.application.ports.policy_repository import (
    PolicyRepositoryProtocol,
)
from assembly_engine.domain.models.policy import QuorumPolicy, VotePolicy


class PolicyRepositoryStub(PolicyRepositoryProtocol):
    """Stub implementation of PolicyRepositoryProtocol.

    Policies are added directly, or from raw rows with ``load_rows`` the
    way a database adapter would hand them over.
    """

    def __init__(self) -> None:
        """Initialize the stub with empty storage."""
        self._quorum_policies: dict[str, QuorumPolicy] = {}
        self._vote_policies: dict[str, VotePolicy] = {}
        self.lookups: list[tuple[str, str]] = []

    def clear(self) -> None:
        """Clear all stored data."""
        self._quorum_policies.clear()
        self._vote_policies.clear()
        self.lookups.clear()

    def add_quorum_policy(self, policy: QuorumPolicy) -> None:
        self._quorum_policies[policy.id] = policy

    def add_vote_policy(self, policy: VotePolicy) -> None:
        self._vote_policies[policy.id] = policy

    def load_rows(
        self,
        quorum_rows: list[Mapping[str, Any]] | None = None,
        vote_rows: list[Mapping[str, Any]] | None = None,
    ) -> None:
        """Add policies from raw rows.

        Raises:
            MalformedPolicyError: If a row does not describe a valid policy.
        """
        for row in quorum_rows or []:
            self.add_quorum_policy(QuorumPolicy.from_mapping(row))
        for row in vote_rows or []:
            self.add_vote_policy(VotePolicy.from_mapping(row))

    async def get_quorum_policy(self, policy_id: str) -> QuorumPolicy | None:
        self.lookups.append(("quorum", policy_id))
        return self._quorum_policies.get(policy_id)

    async def get_vote_policy(self, policy_id: str) -> VotePolicy | None:
        self.lookups.append(("vote", policy_id))
        return self._vote_policies.get(policy_id)
