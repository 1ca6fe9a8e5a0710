"""Configuration errors for the governance decision engine.

A configuration error means no usable policy could be found for a motion,
or a policy record is malformed. Neither is ever bypassed with an implicit
default rule: the caller must fix the configuration.
"""

from __future__ import annotations

from assembly_engine.domain.exceptions import AssemblyError


class ConfigurationError(AssemblyError):
    """Base class for policy configuration errors."""

    reason_code = "configuration_error"


class PolicyNotConfiguredError(ConfigurationError):
    """Raised when neither a motion override nor a meeting default is set.

    Attributes:
        kind: Which policy is missing ("quorum" or "vote").
        motion_id: Motion for which resolution failed, if known.
    """

    reason_code = "no_policy_configured"

    def __init__(self, kind: str, motion_id: str | None = None) -> None:
        self.kind = kind
        self.motion_id = motion_id
        target = f" for motion {motion_id}" if motion_id else ""
        super().__init__(
            f"No {kind} policy configured{target}: "
            "neither a motion override nor a meeting default is set"
        )


class PolicyNotFoundError(ConfigurationError):
    """Raised when a resolved policy id has no matching policy record.

    Attributes:
        kind: Which policy was looked up ("quorum" or "vote").
        policy_id: The id that could not be found.
    """

    reason_code = "policy_not_found"

    def __init__(self, kind: str, policy_id: str) -> None:
        self.kind = kind
        self.policy_id = policy_id
        super().__init__(f"{kind.capitalize()} policy not found: {policy_id}")


class MalformedPolicyError(ConfigurationError):
    """Raised when a policy record violates its invariants.

    Attributes:
        policy_id: Id of the offending policy.
        field: Name of the invalid field.
        detail: What is wrong with it.
    """

    reason_code = "malformed_policy"

    def __init__(self, policy_id: str, field: str, detail: str) -> None:
        self.policy_id = policy_id
        self.field = field
        self.detail = detail
        super().__init__(f"Policy {policy_id}: invalid {field} - {detail}")
