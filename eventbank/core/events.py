"""
Event model for the account aggregate.

Events are immutable records of facts. The variant set is closed:
AccountCreated, FundsDeposited, FundsWithdrawn. Anything else is rejected
by the reducer and by event_from_dict().
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Tuple, Type

from .errors import InvalidTransitionError, UsageError

_COMMON_FIELDS = ("id", "ts")


@dataclass(frozen=True)
class Event:
    """
    Immutable event record.

    Fields:
        id: Opaque unique identifier (from the IdGenerator)
        ts: Timestamp (from the Clock); never used for branching
    """
    id: str
    ts: int

    @property
    def type(self) -> str:
        return type(self).__name__

    def payload(self) -> Dict[str, Any]:
        """Variant-specific fields."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name not in _COMMON_FIELDS
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "id": self.id,
            "ts": self.ts,
            "payload": self.payload(),
        }


def _require_amount(amount: Any) -> None:
    # bool is an int subclass; True is not an amount
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise UsageError(f"amount must be an integer, got {amount!r}")
    if amount <= 0:
        raise UsageError(f"amount must be positive, got {amount}")


@dataclass(frozen=True)
class AccountCreated(Event):
    owner: str

    def __post_init__(self) -> None:
        if not isinstance(self.owner, str) or not self.owner.strip():
            raise UsageError(f"owner must be a non-empty string, got {self.owner!r}")


@dataclass(frozen=True)
class FundsDeposited(Event):
    amount: int

    def __post_init__(self) -> None:
        _require_amount(self.amount)


@dataclass(frozen=True)
class FundsWithdrawn(Event):
    amount: int

    def __post_init__(self) -> None:
        _require_amount(self.amount)


EVENT_TYPES: Tuple[Type[Event], ...] = (AccountCreated, FundsDeposited, FundsWithdrawn)

_BY_NAME: Dict[str, Type[Event]] = {cls.__name__: cls for cls in EVENT_TYPES}


def event_from_dict(data: Dict[str, Any]) -> Event:
    """
    Rebuild an event from its to_dict() form.

    Raises:
        InvalidTransitionError: If the type is not one of EVENT_TYPES
        UsageError: If the payload fails variant validation
    """
    type_name = data.get("type")
    cls = _BY_NAME.get(type_name)
    if cls is None:
        raise InvalidTransitionError(f"Unknown event type: {type_name}")
    return cls(id=data["id"], ts=data["ts"], **dict(data.get("payload") or {}))
