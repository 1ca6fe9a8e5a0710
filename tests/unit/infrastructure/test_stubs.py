"""Unit tests for the in-memory repository stubs."""

import pytest

from assembly_engine.domain.errors import MalformedPolicyError
from assembly_engine.domain.models.manual_tally import ManualTally
from assembly_engine.domain.models.policy import MajorityBase, QuorumMode
from assembly_engine.infrastructure.stubs import (
    DecisionRepositoryStub,
    PolicyRepositoryStub,
)


class TestPolicyRepositoryStub:
    """Tests for PolicyRepositoryStub."""

    async def test_load_rows(self) -> None:
        """Raw rows become validated policies."""
        stub = PolicyRepositoryStub()

        stub.load_rows(
            quorum_rows=[{"id": "q1", "name": "Q", "mode": "evolving", "threshold": 0.5}],
            vote_rows=[{"id": "v1", "base": "eligible", "threshold": 0.5}],
        )

        quorum = await stub.get_quorum_policy("q1")
        vote = await stub.get_vote_policy("v1")
        assert quorum is not None and quorum.mode is QuorumMode.EVOLVING
        assert vote is not None and vote.base is MajorityBase.TOTAL_ELIGIBLE

    async def test_unknown_id_returns_none(self) -> None:
        """Missing policies are None, and the lookup is recorded."""
        stub = PolicyRepositoryStub()

        assert await stub.get_quorum_policy("nope") is None
        assert stub.lookups == [("quorum", "nope")]

    def test_malformed_row_rejected(self) -> None:
        """A malformed row raises instead of being stored."""
        with pytest.raises(MalformedPolicyError):
            PolicyRepositoryStub().load_rows(vote_rows=[{"id": "v1", "threshold": 2}])


class TestDecisionRepositoryStub:
    """Tests for DecisionRepositoryStub."""

    async def test_manual_tally_overwritten(self) -> None:
        """A second save replaces the first."""
        stub = DecisionRepositoryStub()

        await stub.save_manual_tally(ManualTally("r1", 1, 1, 0, 0), "first")
        await stub.save_manual_tally(ManualTally("r1", 2, 2, 0, 0), "second")

        stored = await stub.get_manual_tally("r1")
        assert stored is not None and stored.manual_total == 2
        assert stub.get_justification("r1") == "second"

    async def test_clear(self) -> None:
        """clear empties every store."""
        stub = DecisionRepositoryStub()
        stub.add_manual_tally(ManualTally("r1", 1, 1, 0, 0))

        stub.clear()

        assert await stub.get_manual_tally("r1") is None
        assert stub.save_count == 0
