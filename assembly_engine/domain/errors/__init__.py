"""Domain errors for the assembly engine.

Three families, all inheriting from AssemblyError:
- ConfigurationError: no policy resolvable, or a malformed policy
- ValidationError: inconsistent or rejected tally input
- StateGuardError: lifecycle operation attempted from the wrong state
"""

from assembly_engine.domain.errors.configuration import (
    ConfigurationError,
    MalformedPolicyError,
    PolicyNotConfiguredError,
    PolicyNotFoundError,
)
from assembly_engine.domain.errors.state_guard import (
    InvalidMeetingTransitionError,
    InvalidMotionTransitionError,
    MeetingChecklistError,
    MotionAlreadyOpenError,
    MotionLockedError,
    StateGuardError,
)
from assembly_engine.domain.errors.validation import (
    DerivedFieldEditError,
    MissingAggregateError,
    MissingJustificationError,
    TallyValidationError,
    ValidationError,
)

__all__: list[str] = [
    "ConfigurationError",
    "DerivedFieldEditError",
    "InvalidMeetingTransitionError",
    "InvalidMotionTransitionError",
    "MalformedPolicyError",
    "MeetingChecklistError",
    "MissingAggregateError",
    "MissingJustificationError",
    "MotionAlreadyOpenError",
    "MotionLockedError",
    "PolicyNotConfiguredError",
    "PolicyNotFoundError",
    "StateGuardError",
    "TallyValidationError",
    "ValidationError",
]
