"""
Core account primitives.

- Events: immutable facts (AccountCreated, FundsDeposited, FundsWithdrawn)
- AccountState: immutable materialized view
- Reducer / apply_event: pure state transitions
- Canonical: deterministic serialization
- Clock / IdGenerator: injected capabilities
"""

from .events import Event, AccountCreated, FundsDeposited, FundsWithdrawn, EVENT_TYPES, event_from_dict
from .state import AccountState
from .reducer import Reducer
from .transition import ACCOUNT_REDUCER, apply_event, fold
from .canonical import canonicalize, canonical_json_bytes, canonical_json_str, canonical_hash
from .clock import Clock, SystemClock, SteppingClock, DeterministicClock
from .ids import IdGenerator, SequentialIdGenerator, UuidIdGenerator, stable_id
from .errors import (
    ViolationKind,
    InvariantViolation,
    UsageError,
    ConsistencyError,
    InvalidTransitionError,
    IntegrityError,
    ConfigError,
)

__all__ = [
    "Event",
    "AccountCreated",
    "FundsDeposited",
    "FundsWithdrawn",
    "EVENT_TYPES",
    "event_from_dict",
    "AccountState",
    "Reducer",
    "ACCOUNT_REDUCER",
    "apply_event",
    "fold",
    "canonicalize",
    "canonical_json_bytes",
    "canonical_json_str",
    "canonical_hash",
    "Clock",
    "SystemClock",
    "SteppingClock",
    "DeterministicClock",
    "IdGenerator",
    "SequentialIdGenerator",
    "UuidIdGenerator",
    "stable_id",
    "ViolationKind",
    "InvariantViolation",
    "UsageError",
    "ConsistencyError",
    "InvalidTransitionError",
    "IntegrityError",
    "ConfigError",
]
