"""
Exception types for the account engine.
"""

from enum import Enum
from typing import Optional


class ViolationKind(str, Enum):
    """Domain rules the transition function can reject an event for."""

    ALREADY_ACTIVE = "AlreadyActive"
    INACTIVE_ACCOUNT = "InactiveAccount"
    INSUFFICIENT_FUNDS = "InsufficientFunds"


class InvariantViolation(Exception):
    """Raised when an event would break a domain invariant given current state."""

    def __init__(self, kind: ViolationKind, detail: str = "") -> None:
        self.kind = kind
        self.detail = detail
        message = kind.value if not detail else f"{kind.value}: {detail}"
        super().__init__(message)


class UsageError(ValueError):
    """Raised when an operation is called with malformed arguments."""
    pass


class ConsistencyError(Exception):
    """
    Raised when replay meets a historical event the transition function rejects.

    Fatal: the log is corrupt or incompatible with the current handlers.
    """

    def __init__(self, message: str, seq: Optional[int] = None, event_id: Optional[str] = None) -> None:
        self.seq = seq
        self.event_id = event_id
        super().__init__(message)


class InvalidTransitionError(Exception):
    """Raised when an event type has no registered handler."""
    pass


class IntegrityError(Exception):
    """Raised when hash chain verification fails."""
    pass


class ConfigError(Exception):
    """Raised when an environment setting has an unusable value."""
    pass
