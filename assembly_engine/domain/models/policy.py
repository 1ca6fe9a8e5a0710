"""Quorum and vote policy domain models.

Policies are immutable records owned by the persistence collaborator.
They are validated on construction so the evaluators never see a
threshold outside (0, 1] or a double quorum without its second condition.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from assembly_engine.domain.errors.configuration import MalformedPolicyError


class QuorumMode(Enum):
    """Shape of a quorum policy.

    Modes:
        SINGLE: One ratio against one threshold.
        EVOLVING: One ratio; the threshold relaxes on second convocation.
        DOUBLE: Two independent ratios, both must meet their threshold.
    """

    SINGLE = "single"
    EVOLVING = "evolving"
    DOUBLE = "double"


class QuorumBasis(Enum):
    """Denominator a quorum ratio is computed against."""

    ELIGIBLE_MEMBERS = "eligible_members"
    ELIGIBLE_WEIGHT = "eligible_weight"


class MajorityBase(Enum):
    """Denominator a majority ratio is computed against.

    Bases:
        EXPRESSED: for + against (abstentions excluded unless counted as against).
        TOTAL_ELIGIBLE: every eligible vote, whether cast or not.
        PRESENT: every present vote, whether cast or not.
    """

    EXPRESSED = "expressed"
    TOTAL_ELIGIBLE = "total_eligible"
    PRESENT = "present"


def _check_threshold(policy_id: str, field: str, value: float | None) -> None:
    if value is None:
        return
    if not 0.0 < value <= 1.0:
        raise MalformedPolicyError(policy_id, field, f"{value} is outside (0, 1]")


def _parse_enum(policy_id: str, field: str, enum_cls: type[Enum], raw: Any) -> Any:
    if isinstance(raw, enum_cls):
        return raw
    # "eligible" is the legacy spelling of total_eligible
    if enum_cls is MajorityBase and raw == "eligible":
        return MajorityBase.TOTAL_ELIGIBLE
    try:
        return enum_cls(raw)
    except ValueError:
        allowed = [member.value for member in enum_cls]  # type: ignore[attr-defined]
        raise MalformedPolicyError(
            policy_id, field, f"{raw!r} is not one of {allowed}"
        ) from None


def _optional_float(policy_id: str, field: str, raw: Any) -> float | None:
    if raw is None or raw == "":
        return None
    try:
        return float(raw)
    except (TypeError, ValueError):
        raise MalformedPolicyError(policy_id, field, "not a number") from None


_TRUE_STRINGS = frozenset({"true", "1", "t"})
_FALSE_STRINGS = frozenset({"false", "0", "f"})


def _parse_bool(policy_id: str, field: str, raw: Any, default: bool) -> bool:
    if raw is None:
        return default
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, int) and raw in (0, 1):
        return bool(raw)
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in _TRUE_STRINGS:
            return True
        if normalized in _FALSE_STRINGS:
            return False
    raise MalformedPolicyError(policy_id, field, f"{raw!r} is not a boolean")


@dataclass(frozen=True)
class QuorumPolicy:
    """Quorum rule applied to a meeting or a motion.

    Attributes:
        id: Policy identifier.
        name: Display name, used in justifications.
        mode: single, evolving or double.
        denominator: Basis of the primary ratio.
        threshold: Primary threshold in (0, 1].
        threshold_call2: Evolving mode only, threshold on second convocation.
        denominator2: Double mode only, basis of the second ratio.
        threshold2: Double mode only, second threshold in (0, 1].
        include_proxies: Whether represented (proxied) members count as present.
        count_remote: Whether remote members count as present.
    """

    id: str
    name: str
    mode: QuorumMode
    denominator: QuorumBasis
    threshold: float
    threshold_call2: float | None = None
    denominator2: QuorumBasis | None = None
    threshold2: float | None = None
    include_proxies: bool = True
    count_remote: bool = True

    def __post_init__(self) -> None:
        """Validate policy invariants.

        Raises:
            MalformedPolicyError: If a threshold is outside (0, 1] or the
                double mode second condition is missing.
        """
        _check_threshold(self.id, "threshold", self.threshold)
        _check_threshold(self.id, "threshold_call2", self.threshold_call2)
        _check_threshold(self.id, "threshold2", self.threshold2)

        if self.mode is QuorumMode.DOUBLE:
            if self.denominator2 is None:
                raise MalformedPolicyError(
                    self.id, "denominator2", "required in double mode"
                )
            if self.threshold2 is None:
                raise MalformedPolicyError(
                    self.id, "threshold2", "required in double mode"
                )
            if self.denominator2 is self.denominator:
                raise MalformedPolicyError(
                    self.id,
                    "denominator2",
                    "must differ from denominator in double mode",
                )

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> QuorumPolicy:
        """Build a policy from a raw collaborator row.

        Args:
            row: Mapping with string enums and nullable optional fields.

        Returns:
            A validated QuorumPolicy.

        Raises:
            MalformedPolicyError: If any field is missing or invalid.
        """
        policy_id = str(row.get("id") or "")
        try:
            threshold = float(row["threshold"])
        except (KeyError, TypeError, ValueError):
            raise MalformedPolicyError(
                policy_id, "threshold", "missing or not a number"
            ) from None

        denominator2_raw = row.get("denominator2")
        return cls(
            id=policy_id,
            name=str(row.get("name") or "Quorum"),
            mode=_parse_enum(policy_id, "mode", QuorumMode, row.get("mode", "single")),
            denominator=_parse_enum(
                policy_id,
                "denominator",
                QuorumBasis,
                row.get("denominator", "eligible_members"),
            ),
            threshold=threshold,
            threshold_call2=_optional_float(
                policy_id, "threshold_call2", row.get("threshold_call2")
            ),
            denominator2=(
                _parse_enum(policy_id, "denominator2", QuorumBasis, denominator2_raw)
                if denominator2_raw
                else None
            ),
            threshold2=_optional_float(policy_id, "threshold2", row.get("threshold2")),
            include_proxies=_parse_bool(
                policy_id, "include_proxies", row.get("include_proxies"), True
            ),
            count_remote=_parse_bool(
                policy_id, "count_remote", row.get("count_remote"), True
            ),
        )


@dataclass(frozen=True)
class VotePolicy:
    """Majority rule applied to a meeting or a motion.

    Attributes:
        id: Policy identifier.
        name: Display name.
        base: Denominator of the majority ratio.
        threshold: Required ratio of "for" votes, in (0, 1].
        abstention_as_against: Count abstentions as votes against.
    """

    id: str
    name: str
    base: MajorityBase
    threshold: float
    abstention_as_against: bool = False

    def __post_init__(self) -> None:
        _check_threshold(self.id, "threshold", self.threshold)

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> VotePolicy:
        """Build a policy from a raw collaborator row.

        Raises:
            MalformedPolicyError: If any field is missing or invalid.
        """
        policy_id = str(row.get("id") or "")
        try:
            threshold = float(row["threshold"])
        except (KeyError, TypeError, ValueError):
            raise MalformedPolicyError(
                policy_id, "threshold", "missing or not a number"
            ) from None

        return cls(
            id=policy_id,
            name=str(row.get("name") or "Majority"),
            base=_parse_enum(policy_id, "base", MajorityBase, row.get("base", "expressed")),
            threshold=threshold,
            abstention_as_against=_parse_bool(
                policy_id,
                "abstention_as_against",
                row.get("abstention_as_against"),
                False,
            ),
        )
