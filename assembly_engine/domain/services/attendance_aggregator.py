"""Attendance aggregation domain service.

Turns raw roster attendance into the AttendanceAggregate the quorum
evaluator consumes, applying the policy's inclusion flags:

- present members always count
- remote members count when count_remote is set
- an absent giver counts through a counted proxy receiver when
  include_proxies is set; the giver's own weight is carried
- with motion_opened_at, members who arrived after the motion opened do
  not count (late-arrival rule)

Eligible figures cover the whole roster.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

import structlog

from assembly_engine.domain.models.attendance import (
    AttendanceAggregate,
    AttendanceMode,
    AttendanceRecord,
    Proxy,
)
from assembly_engine.domain.models.policy import QuorumPolicy

logger = structlog.get_logger(__name__)


def _is_late(record: AttendanceRecord, motion_opened_at: datetime | None) -> bool:
    if motion_opened_at is None or record.present_from is None:
        return False
    return record.present_from > motion_opened_at


def aggregate_attendance(
    records: Iterable[AttendanceRecord],
    proxies: Iterable[Proxy] = (),
    *,
    include_proxies: bool = True,
    count_remote: bool = True,
    motion_opened_at: datetime | None = None,
) -> AttendanceAggregate:
    """Aggregate roster attendance into quorum figures.

    Args:
        records: One attendance record per roster member.
        proxies: Giver -> receiver delegations.
        include_proxies: Count represented givers as present.
        count_remote: Count remote members as present.
        motion_opened_at: Opening time of the motion, for the late-arrival rule.

    Returns:
        AttendanceAggregate with present and eligible counts and weights.
    """
    roster = {record.member_id: record for record in records}

    counted_modes = {AttendanceMode.PRESENT}
    if count_remote:
        counted_modes.add(AttendanceMode.REMOTE)

    counted: dict[str, float] = {
        member_id: record.weight
        for member_id, record in roster.items()
        if record.mode in counted_modes and not _is_late(record, motion_opened_at)
    }
    attending = dict(counted)

    represented = 0
    if include_proxies:
        for proxy in proxies:
            giver = roster.get(proxy.giver_id)
            if giver is None or proxy.giver_id in counted:
                continue
            if giver.mode is not AttendanceMode.ABSENT:
                continue
            if proxy.receiver_id not in attending:
                continue
            counted[proxy.giver_id] = giver.weight
            represented += 1

    aggregate = AttendanceAggregate(
        present_count=len(counted),
        present_weight=sum(counted.values()),
        eligible_count=len(roster),
        eligible_weight=sum(record.weight for record in roster.values()),
    )
    logger.debug(
        "attendance_aggregated",
        present_count=aggregate.present_count,
        eligible_count=aggregate.eligible_count,
        represented=represented,
        late_rule=motion_opened_at is not None,
    )
    return aggregate


def aggregate_for_policy(
    records: Iterable[AttendanceRecord],
    proxies: Iterable[Proxy],
    policy: QuorumPolicy,
    motion_opened_at: datetime | None = None,
) -> AttendanceAggregate:
    """Aggregate attendance using the inclusion flags of a quorum policy."""
    return aggregate_attendance(
        records,
        proxies,
        include_proxies=policy.include_proxies,
        count_remote=policy.count_remote,
        motion_opened_at=motion_opened_at,
    )
