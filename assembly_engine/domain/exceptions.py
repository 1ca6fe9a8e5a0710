"""Base exception classes for the assembly engine domain layer."""


class AssemblyError(Exception):
    """Base exception for all domain errors.

    All domain-specific exceptions MUST inherit from this class.
    Every subclass exposes a machine-readable ``reason_code`` so callers
    can map failures without parsing messages.

    Attributes:
        reason_code: Machine-readable reason for the failure.
    """

    reason_code: str = "assembly_error"

    def __init__(self, message: str = "", reason_code: str | None = None) -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
            reason_code: Overrides the class-level reason code.
        """
        if reason_code is not None:
            self.reason_code = reason_code
        super().__init__(message)
