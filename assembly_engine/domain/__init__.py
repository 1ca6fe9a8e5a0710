"""Domain layer - Pure governance decision logic.

This layer contains:
- Domain models (policies, meetings, motions, tallies, decisions)
- Domain services (resolver, evaluators, reconciler, consolidator,
  lifecycle state machines)
- Domain errors

CRITICAL: This layer must NOT import from application, infrastructure, or api.
"""

from assembly_engine.domain.errors import (
    ConfigurationError,
    StateGuardError,
    ValidationError,
)
from assembly_engine.domain.exceptions import AssemblyError

__all__: list[str] = [
    "AssemblyError",
    "ConfigurationError",
    "StateGuardError",
    "ValidationError",
]
