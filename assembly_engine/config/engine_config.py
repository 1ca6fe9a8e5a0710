"""Decision engine configuration.

This module defines tunables for the orchestration layer, with
environment variable overrides for deployment.

Environment Variables:
- ASSEMBLY_RATIO_DECIMALS: Precision of ratios in justification texts
  (default: 4, min: 0, max: 10)
- ASSEMBLY_REQUIRE_TALLY_JUSTIFICATION: Require a justification to save a
  manual tally (default: true)
- ASSEMBLY_MAX_JUSTIFICATION_LENGTH: Longest accepted justification
  (default: 2000, min: 1, max: 10000)

Evaluations never round: the precision only affects human-readable text.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_bool_env(key: str, default: bool) -> bool:
    """Get boolean environment variable with default.

    Accepts true/false, yes/no, on/off and 1/0 (case-insensitive).
    """
    value = os.environ.get(key)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in ("1", "true", "yes", "on"):
        return True
    if normalized in ("0", "false", "no", "off"):
        return False
    return default


# =============================================================================
# Justification text precision
# =============================================================================

DEFAULT_RATIO_DECIMALS = 4
MIN_RATIO_DECIMALS = 0
MAX_RATIO_DECIMALS = 10

# =============================================================================
# Degraded (manual) tally justification
# =============================================================================

DEFAULT_REQUIRE_TALLY_JUSTIFICATION = True
DEFAULT_MAX_JUSTIFICATION_LENGTH = 2000
MIN_JUSTIFICATION_LENGTH = 1
MAX_JUSTIFICATION_LENGTH = 10000


@dataclass(frozen=True)
class DecisionEngineConfig:
    """Configuration for the governance decision service.

    Attributes:
        ratio_decimals: Decimals shown for ratios in quorum justifications.
        require_tally_justification: Refuse to save a manual tally without
            a justification.
        max_justification_length: Longest justification accepted.
    """

    ratio_decimals: int = DEFAULT_RATIO_DECIMALS
    require_tally_justification: bool = DEFAULT_REQUIRE_TALLY_JUSTIFICATION
    max_justification_length: int = DEFAULT_MAX_JUSTIFICATION_LENGTH

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not MIN_RATIO_DECIMALS <= self.ratio_decimals <= MAX_RATIO_DECIMALS:
            raise ValueError(
                f"ratio_decimals must be between {MIN_RATIO_DECIMALS} "
                f"and {MAX_RATIO_DECIMALS}, got {self.ratio_decimals}"
            )
        if (
            not MIN_JUSTIFICATION_LENGTH
            <= self.max_justification_length
            <= MAX_JUSTIFICATION_LENGTH
        ):
            raise ValueError(
                f"max_justification_length must be between {MIN_JUSTIFICATION_LENGTH} "
                f"and {MAX_JUSTIFICATION_LENGTH}, got {self.max_justification_length}"
            )

    @classmethod
    def from_environment(cls) -> DecisionEngineConfig:
        """Create config from environment variables with defaults.

        Unparsable values fall back to the default; out-of-range values are
        clamped to the nearest bound.

        Returns:
            DecisionEngineConfig with values from environment or defaults.
        """
        decimals = _get_int_env("ASSEMBLY_RATIO_DECIMALS", DEFAULT_RATIO_DECIMALS)
        # Clamp to valid range
        decimals = max(MIN_RATIO_DECIMALS, min(decimals, MAX_RATIO_DECIMALS))

        max_length = _get_int_env(
            "ASSEMBLY_MAX_JUSTIFICATION_LENGTH",
            DEFAULT_MAX_JUSTIFICATION_LENGTH,
        )
        # Clamp to valid range
        max_length = max(
            MIN_JUSTIFICATION_LENGTH,
            min(max_length, MAX_JUSTIFICATION_LENGTH),
        )

        return cls(
            ratio_decimals=decimals,
            require_tally_justification=_get_bool_env(
                "ASSEMBLY_REQUIRE_TALLY_JUSTIFICATION",
                DEFAULT_REQUIRE_TALLY_JUSTIFICATION,
            ),
            max_justification_length=max_length,
        )


# Default production config
DEFAULT_ENGINE_CONFIG = DecisionEngineConfig()

# Testing config: short texts, justification optional
TEST_ENGINE_CONFIG = DecisionEngineConfig(
    ratio_decimals=2,
    require_tally_justification=False,
    max_justification_length=DEFAULT_MAX_JUSTIFICATION_LENGTH,
)
