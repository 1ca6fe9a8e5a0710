"""Motion domain model.

A motion's status is never stored: it is derived from its timestamps.

    pending: opened_at and closed_at both unset
    open:    opened_at set, closed_at unset
    closed:  closed_at set

Title, description and policy overrides may change only while pending.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum


class MotionStatus(Enum):
    """Status in the motion lifecycle (pending -> open -> closed)."""

    PENDING = "pending"
    OPEN = "open"
    CLOSED = "closed"


@dataclass(frozen=True)
class Motion:
    """A motion put to the vote of a meeting.

    Attributes:
        id: Motion identifier.
        meeting_id: Owning meeting.
        title: Motion title.
        description: Optional longer text.
        quorum_policy_id: Optional override of the meeting's quorum policy.
        vote_policy_id: Optional override of the meeting's vote policy.
        secret: Whether the ballot is secret.
        opened_at: When voting opened.
        closed_at: When voting closed.
    """

    id: str
    meeting_id: str
    title: str = ""
    description: str = ""
    quorum_policy_id: str | None = None
    vote_policy_id: str | None = None
    secret: bool = False
    opened_at: datetime | None = None
    closed_at: datetime | None = None

    @property
    def status(self) -> MotionStatus:
        if self.closed_at is not None:
            return MotionStatus.CLOSED
        if self.opened_at is not None:
            return MotionStatus.OPEN
        return MotionStatus.PENDING

    @property
    def is_pending(self) -> bool:
        return self.status is MotionStatus.PENDING

    @property
    def is_open(self) -> bool:
        return self.status is MotionStatus.OPEN

    def with_opened_at(self, opened_at: datetime) -> Motion:
        return replace(self, opened_at=opened_at)

    def with_closed_at(self, closed_at: datetime) -> Motion:
        return replace(self, closed_at=closed_at)


@dataclass(frozen=True)
class MotionEdit:
    """Changes requested on a pending motion.

    A field left as None is not changed. An empty string clears a policy
    override so the meeting default applies again.
    """

    title: str | None = None
    description: str | None = None
    quorum_policy_id: str | None = None
    vote_policy_id: str | None = None

    def apply_to(self, motion: Motion) -> Motion:
        """Return the motion with this edit applied (no guard applied here)."""
        changes: dict[str, str | None] = {}
        if self.title is not None:
            changes["title"] = self.title
        if self.description is not None:
            changes["description"] = self.description
        if self.quorum_policy_id is not None:
            changes["quorum_policy_id"] = self.quorum_policy_id or None
        if self.vote_policy_id is not None:
            changes["vote_policy_id"] = self.vote_policy_id or None
        return replace(motion, **changes)  # type: ignore[arg-type]
