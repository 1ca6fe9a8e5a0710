"""
Pytest configuration and shared fixtures for assembly engine tests.

Testing Standards:
- Async tests run under pytest-asyncio (auto mode enabled in pyproject.toml)
- Ports are replaced by the in-memory stubs, not mocks
- Unit tests go in tests/unit/
"""

import pytest

from assembly_engine.domain.models.policy import (
    MajorityBase,
    QuorumBasis,
    QuorumMode,
    QuorumPolicy,
    VotePolicy,
)


@pytest.fixture
def half_weight_quorum() -> QuorumPolicy:
    """Single-mode quorum: half of the eligible weight."""
    return QuorumPolicy(
        id="q-half",
        name="Half weight",
        mode=QuorumMode.SINGLE,
        denominator=QuorumBasis.ELIGIBLE_WEIGHT,
        threshold=0.5,
    )


@pytest.fixture
def simple_majority() -> VotePolicy:
    """Simple majority of expressed votes."""
    return VotePolicy(
        id="v-simple",
        name="Simple majority",
        base=MajorityBase.EXPRESSED,
        threshold=0.5,
    )
