"""Policy repository port.

This module defines the abstract interface through which the decision
service loads quorum and vote policy records. The persistence
collaborator owns the storage; the engine only reads.
"""

from __future__ import annotations

from typing import Protocol

from assembly_engine.domain.models.policy import QuorumPolicy, VotePolicy


class PolicyRepositoryProtocol(Protocol):
    """Protocol for policy lookup.

    Methods:
        get_quorum_policy: Load a quorum policy by id
        get_vote_policy: Load a vote policy by id
    """

    async def get_quorum_policy(self, policy_id: str) -> QuorumPolicy | None:
        """Get a quorum policy.

        Args:
            policy_id: Policy identifier.

        Returns:
            The QuorumPolicy if found, None otherwise.

        Raises:
            MalformedPolicyError: If the stored record is invalid.
        """
        ...

    async def get_vote_policy(self, policy_id: str) -> VotePolicy | None:
        """Get a vote policy.

        Args:
            policy_id: Policy identifier.

        Returns:
            The VotePolicy if found, None otherwise.

        Raises:
            MalformedPolicyError: If the stored record is invalid.
        """
        ...
