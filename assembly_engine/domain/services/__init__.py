"""Domain services for the assembly engine.

The governance decision engine proper. Every service is a pure,
synchronous function of its inputs: no I/O, no module-level cache, no
locking. Callers own fetching, caching and write serialization.

Public surface:
- resolve_policies: effective quorum/vote policy of a motion
- evaluate_quorum: quorum met/not met with participation ratios
- evaluate_majority: majority met/not met with the ratio used
- reconcile_tally / validate_manual_tally: manual tally editing rules
- consolidate: final decision with a reason code
- motion_can_transition / meeting_can_transition: lifecycle predicates
"""

from assembly_engine.domain.services.attendance_aggregator import (
    aggregate_attendance,
    aggregate_for_policy,
)
from assembly_engine.domain.services.ballot_aggregator import aggregate_ballots
from assembly_engine.domain.services.decision_consolidator import (
    DecisionConsolidator,
    consolidate,
    select_tally_source,
)
from assembly_engine.domain.services.majority_evaluator import (
    MajorityEvaluator,
    evaluate_majority,
)
from assembly_engine.domain.services.meeting_state_machine import (
    MeetingStateMachine,
    available_meeting_transitions,
    meeting_can_transition,
    meeting_status_can_transition,
)
from assembly_engine.domain.services.motion_state_machine import (
    MotionStateMachine,
    motion_can_transition,
)
from assembly_engine.domain.services.policy_resolver import (
    PolicyResolver,
    resolve_policies,
)
from assembly_engine.domain.services.quorum_evaluator import (
    QuorumEvaluator,
    evaluate_quorum,
)
from assembly_engine.domain.services.tally_reconciler import (
    TallyReconciler,
    apply_unanimity,
    coerce_count,
    reconcile_tally,
    set_manual_total_mode,
    validate_manual_tally,
)

__all__ = [
    "DecisionConsolidator",
    "MajorityEvaluator",
    "MeetingStateMachine",
    "MotionStateMachine",
    "PolicyResolver",
    "QuorumEvaluator",
    "TallyReconciler",
    "aggregate_attendance",
    "aggregate_ballots",
    "aggregate_for_policy",
    "apply_unanimity",
    "available_meeting_transitions",
    "coerce_count",
    "consolidate",
    "evaluate_majority",
    "evaluate_quorum",
    "meeting_can_transition",
    "meeting_status_can_transition",
    "motion_can_transition",
    "reconcile_tally",
    "resolve_policies",
    "select_tally_source",
    "set_manual_total_mode",
    "validate_manual_tally",
]
