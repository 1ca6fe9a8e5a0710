"""Policy resolution domain service.

Rule, applied separately to the quorum and the vote policy:

    effective = motion override if set and non-empty, else meeting default

When neither is set the resolution carries None for that policy;
``require_*`` turns that into a PolicyNotConfiguredError. There is no
implicit fallback rule.
"""

from __future__ import annotations

from assembly_engine.domain.errors.configuration import PolicyNotConfiguredError
from assembly_engine.domain.models.decision import PolicyResolution
from assembly_engine.domain.models.meeting import Meeting
from assembly_engine.domain.models.motion import Motion


def _pick(override: str | None, default: str | None) -> tuple[str | None, bool]:
    if override is not None and override.strip():
        return override, True
    if default is not None and default.strip():
        return default, False
    return None, False


class PolicyResolver:
    """Resolves the effective quorum and vote policies of a motion."""

    @staticmethod
    def resolve(motion: Motion, meeting: Meeting) -> PolicyResolution:
        """Apply override-over-default resolution.

        Args:
            motion: Motion with optional policy overrides.
            meeting: Meeting holding the default policies.

        Returns:
            PolicyResolution with the effective ids and override flags.
        """
        quorum_id, quorum_override = _pick(
            motion.quorum_policy_id, meeting.default_quorum_policy_id
        )
        vote_id, vote_override = _pick(
            motion.vote_policy_id, meeting.default_vote_policy_id
        )
        return PolicyResolution(
            quorum_policy_id=quorum_id,
            vote_policy_id=vote_id,
            quorum_is_override=quorum_override,
            vote_is_override=vote_override,
        )

    @staticmethod
    def require_quorum_policy_id(
        resolution: PolicyResolution, motion_id: str | None = None
    ) -> str:
        """Raises PolicyNotConfiguredError when no quorum policy resolved."""
        if resolution.quorum_policy_id is None:
            raise PolicyNotConfiguredError("quorum", motion_id)
        return resolution.quorum_policy_id

    @staticmethod
    def require_vote_policy_id(
        resolution: PolicyResolution, motion_id: str | None = None
    ) -> str:
        """Raises PolicyNotConfiguredError when no vote policy resolved."""
        if resolution.vote_policy_id is None:
            raise PolicyNotConfiguredError("vote", motion_id)
        return resolution.vote_policy_id


def resolve_policies(motion: Motion, meeting: Meeting) -> PolicyResolution:
    """Module-level shortcut for PolicyResolver.resolve."""
    return PolicyResolver.resolve(motion, meeting)
