"""Unit tests for decision engine configuration."""

import pytest

from assembly_engine.config import (
    DEFAULT_ENGINE_CONFIG,
    TEST_ENGINE_CONFIG,
    DecisionEngineConfig,
)


class TestDecisionEngineConfig:
    """Tests for DecisionEngineConfig defaults and validation."""

    def test_defaults(self) -> None:
        """Production defaults."""
        assert DEFAULT_ENGINE_CONFIG.ratio_decimals == 4
        assert DEFAULT_ENGINE_CONFIG.require_tally_justification is True
        assert DEFAULT_ENGINE_CONFIG.max_justification_length == 2000

    def test_test_preset(self) -> None:
        """The test preset relaxes the justification rule."""
        assert TEST_ENGINE_CONFIG.ratio_decimals == 2
        assert TEST_ENGINE_CONFIG.require_tally_justification is False

    @pytest.mark.parametrize("decimals", [-1, 11])
    def test_ratio_decimals_bounds(self, decimals: int) -> None:
        """Out-of-range precision is rejected."""
        with pytest.raises(ValueError, match="ratio_decimals"):
            DecisionEngineConfig(ratio_decimals=decimals)

    @pytest.mark.parametrize("length", [0, 10001])
    def test_justification_length_bounds(self, length: int) -> None:
        """Out-of-range justification length is rejected."""
        with pytest.raises(ValueError, match="max_justification_length"):
            DecisionEngineConfig(max_justification_length=length)

    def test_frozen(self) -> None:
        """Configuration is immutable."""
        with pytest.raises(AttributeError):
            DEFAULT_ENGINE_CONFIG.ratio_decimals = 2  # type: ignore[misc]


class TestFromEnvironment:
    """Tests for DecisionEngineConfig.from_environment."""

    def test_no_environment_gives_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Unset variables fall back to defaults."""
        for key in (
            "ASSEMBLY_RATIO_DECIMALS",
            "ASSEMBLY_REQUIRE_TALLY_JUSTIFICATION",
            "ASSEMBLY_MAX_JUSTIFICATION_LENGTH",
        ):
            monkeypatch.delenv(key, raising=False)

        assert DecisionEngineConfig.from_environment() == DEFAULT_ENGINE_CONFIG

    def test_values_read(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Valid values are applied."""
        monkeypatch.setenv("ASSEMBLY_RATIO_DECIMALS", "2")
        monkeypatch.setenv("ASSEMBLY_REQUIRE_TALLY_JUSTIFICATION", "no")
        monkeypatch.setenv("ASSEMBLY_MAX_JUSTIFICATION_LENGTH", "500")

        config = DecisionEngineConfig.from_environment()

        assert config.ratio_decimals == 2
        assert config.require_tally_justification is False
        assert config.max_justification_length == 500

    def test_out_of_range_clamped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Out-of-range values clamp to the nearest bound."""
        monkeypatch.setenv("ASSEMBLY_RATIO_DECIMALS", "99")
        monkeypatch.setenv("ASSEMBLY_MAX_JUSTIFICATION_LENGTH", "-5")

        config = DecisionEngineConfig.from_environment()

        assert config.ratio_decimals == 10
        assert config.max_justification_length == 1

    def test_unparsable_values_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Garbage falls back to the default."""
        monkeypatch.setenv("ASSEMBLY_RATIO_DECIMALS", "four")
        monkeypatch.setenv("ASSEMBLY_REQUIRE_TALLY_JUSTIFICATION", "maybe")

        config = DecisionEngineConfig.from_environment()

        assert config.ratio_decimals == 4
        assert config.require_tally_justification is True
