"""Configuration module for the assembly engine.

Available Configurations:
- DecisionEngineConfig: justification text precision and degraded tally rules
"""

from assembly_engine.config.engine_config import (
    DEFAULT_ENGINE_CONFIG,
    TEST_ENGINE_CONFIG,
    DecisionEngineConfig,
)

__all__ = [
    "DecisionEngineConfig",
    "DEFAULT_ENGINE_CONFIG",
    "TEST_ENGINE_CONFIG",
]
