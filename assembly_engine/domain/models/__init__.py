"""Domain models for the assembly engine.

Immutable value objects (frozen dataclasses) exchanged between the engine
and its collaborators.
"""

from assembly_engine.domain.models.attendance import (
    AttendanceAggregate,
    AttendanceMode,
    AttendanceRecord,
    Proxy,
)
from assembly_engine.domain.models.ballot import (
    Ballot,
    BallotAggregate,
    BallotValue,
    TallyAggregate,
)
from assembly_engine.domain.models.decision import (
    Decision,
    DecisionReason,
    DecisionStatus,
    MajorityResult,
    PolicyResolution,
    QuorumBlock,
    QuorumResult,
    TallySource,
)
from assembly_engine.domain.models.manual_tally import ManualTally, TallyEdit, TallyField
from assembly_engine.domain.models.meeting import (
    MEETING_TRANSITION_MATRIX,
    Meeting,
    MeetingChecklist,
    MeetingStatus,
    TransitionCheck,
    TransitionIssue,
)
from assembly_engine.domain.models.motion import Motion, MotionEdit, MotionStatus
from assembly_engine.domain.models.policy import (
    MajorityBase,
    QuorumBasis,
    QuorumMode,
    QuorumPolicy,
    VotePolicy,
)

__all__: list[str] = [
    "MEETING_TRANSITION_MATRIX",
    "AttendanceAggregate",
    "AttendanceMode",
    "AttendanceRecord",
    "Ballot",
    "BallotAggregate",
    "BallotValue",
    "Decision",
    "DecisionReason",
    "DecisionStatus",
    "MajorityBase",
    "MajorityResult",
    "ManualTally",
    "Meeting",
    "MeetingChecklist",
    "MeetingStatus",
    "Motion",
    "MotionEdit",
    "MotionStatus",
    "PolicyResolution",
    "Proxy",
    "QuorumBasis",
    "QuorumBlock",
    "QuorumMode",
    "QuorumPolicy",
    "QuorumResult",
    "TallyAggregate",
    "TallyEdit",
    "TallyField",
    "TallySource",
    "TransitionCheck",
    "TransitionIssue",
    "VotePolicy",
]
