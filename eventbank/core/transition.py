"""
Account state transition function.

apply_event(state, event) -> state is the only way an AccountState changes.
The reducer is sealed at import, so a new event variant without a handler
makes this module fail to import.
"""

from typing import Iterable, Optional

from .errors import InvariantViolation, ViolationKind
from .events import EVENT_TYPES, AccountCreated, Event, FundsDeposited, FundsWithdrawn
from .reducer import Reducer
from .state import AccountState


def on_account_created(state: AccountState, event: AccountCreated) -> AccountState:
    if state.active:
        raise InvariantViolation(ViolationKind.ALREADY_ACTIVE, f"owned by {state.owner!r}")
    return AccountState(owner=event.owner, balance=0, active=True)


def on_funds_deposited(state: AccountState, event: FundsDeposited) -> AccountState:
    if not state.active:
        raise InvariantViolation(ViolationKind.INACTIVE_ACCOUNT)
    return state.with_balance(state.balance + event.amount)


def on_funds_withdrawn(state: AccountState, event: FundsWithdrawn) -> AccountState:
    if not state.active:
        raise InvariantViolation(ViolationKind.INACTIVE_ACCOUNT)
    # Withdrawing the full balance is allowed.
    if event.amount > state.balance:
        raise InvariantViolation(
            ViolationKind.INSUFFICIENT_FUNDS,
            f"requested {event.amount}, available {state.balance}",
        )
    return state.with_balance(state.balance - event.amount)


def build_account_reducer() -> Reducer:
    reducer = Reducer()
    reducer.register(AccountCreated, on_account_created)
    reducer.register(FundsDeposited, on_funds_deposited)
    reducer.register(FundsWithdrawn, on_funds_withdrawn)
    return reducer.seal(EVENT_TYPES)


ACCOUNT_REDUCER = build_account_reducer()


def apply_event(state: AccountState, event: Event) -> AccountState:
    """Fold one event over state. Raises InvariantViolation on a rule breach."""
    return ACCOUNT_REDUCER.apply(state, event)


def fold(events: Iterable[Event], state: Optional[AccountState] = None) -> AccountState:
    """Fold apply_event over events, starting from the empty state by default."""
    current = AccountState.initial() if state is None else state
    for event in events:
        current = apply_event(current, event)
    return current
