"""In-memory stub implementations of the application ports.

WARNING: These stubs are NOT for production use.
"""

from assembly_engine.infrastructure.stubs.decision_repository_stub import (
    DecisionRepositoryStub,
)
from assembly_engine.infrastructure.stubs.policy_repository_stub import (
    PolicyRepositoryStub,
)

__all__: list[str] = [
    "DecisionRepositoryStub",
    "PolicyRepositoryStub",
]
