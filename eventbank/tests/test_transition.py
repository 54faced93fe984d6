"""
Tests for the transition function.

Critical: apply_event must be pure, deterministic and total over the
event variants.
"""

import random
from dataclasses import dataclass

import pytest

from eventbank.core.errors import InvalidTransitionError, InvariantViolation, ViolationKind
from eventbank.core.events import EVENT_TYPES, AccountCreated, Event, FundsDeposited, FundsWithdrawn
from eventbank.core.reducer import Reducer
from eventbank.core.state import AccountState
from eventbank.core.transition import ACCOUNT_REDUCER, apply_event, fold

ACTIVE = AccountState(owner="Alice", balance=100, active=True)


def test_account_created_activates():
    s = apply_event(AccountState.initial(), AccountCreated(id="e1", ts=1, owner="Alice"))

    assert s == AccountState(owner="Alice", balance=0, active=True)


def test_account_created_twice_fails():
    with pytest.raises(InvariantViolation) as exc:
        apply_event(ACTIVE, AccountCreated(id="e2", ts=2, owner="Bob"))

    assert exc.value.kind is ViolationKind.ALREADY_ACTIVE


@pytest.mark.parametrize(
    "event",
    [FundsDeposited(id="e1", ts=1, amount=50), FundsWithdrawn(id="e1", ts=1, amount=50)],
)
def test_inactive_account_rejects_money_events(event):
    with pytest.raises(InvariantViolation) as exc:
        apply_event(AccountState.initial(), event)

    assert exc.value.kind is ViolationKind.INACTIVE_ACCOUNT


def test_deposit_and_withdraw_adjust_balance():
    s1 = apply_event(ACTIVE, FundsDeposited(id="e1", ts=1, amount=25))
    s2 = apply_event(s1, FundsWithdrawn(id="e2", ts=2, amount=40))

    assert s1.balance == 125
    assert s2 == AccountState(owner="Alice", balance=85, active=True)


def test_withdraw_full_balance_allowed():
    s = apply_event(ACTIVE, FundsWithdrawn(id="e1", ts=1, amount=100))

    assert s.balance == 0


def test_withdraw_beyond_balance_fails():
    with pytest.raises(InvariantViolation) as exc:
        apply_event(ACTIVE, FundsWithdrawn(id="e1", ts=1, amount=101))

    assert exc.value.kind is ViolationKind.INSUFFICIENT_FUNDS


def test_transition_does_not_mutate_input():
    """Old state references stay valid snapshots."""
    before = ACTIVE
    after = apply_event(before, FundsDeposited(id="e1", ts=1, amount=1))

    assert before == AccountState(owner="Alice", balance=100, active=True)
    assert after is not before


def test_transition_ignores_id_and_timestamp():
    a = apply_event(ACTIVE, FundsDeposited(id="x", ts=1, amount=5))
    b = apply_event(ACTIVE, FundsDeposited(id="y", ts=999, amount=5))

    assert a == b


def _random_history(rng: random.Random, length: int):
    """Random events, keeping only those that apply."""
    state = AccountState.initial()
    events = []
    for i in range(length):
        roll = rng.random()
        if roll < 0.1:
            ev: Event = AccountCreated(id=str(i), ts=i, owner=rng.choice(["Alice", "Bob"]))
        elif roll < 0.55:
            ev = FundsDeposited(id=str(i), ts=i, amount=rng.randint(1, 100))
        else:
            ev = FundsWithdrawn(id=str(i), ts=i, amount=rng.randint(1, 100))
        try:
            state = apply_event(state, ev)
        except InvariantViolation:
            continue
        events.append(ev)
    return events, state


def test_fold_deterministic_over_random_histories():
    rng = random.Random(1234)
    for _ in range(50):
        events, incremental = _random_history(rng, 40)

        first = fold(events)
        second = fold(events)

        assert first == second == incremental
        assert first.violations() == []


def test_reducer_covers_every_variant():
    assert ACCOUNT_REDUCER.sealed
    for cls in EVENT_TYPES:
        assert cls in ACCOUNT_REDUCER._handlers


def test_reducer_seal_reports_missing_handlers():
    r = Reducer()
    r.register(AccountCreated, lambda s, e: s)

    with pytest.raises(InvalidTransitionError) as exc:
        r.seal(EVENT_TYPES)

    assert "FundsDeposited" in str(exc.value)
    assert "FundsWithdrawn" in str(exc.value)


def test_sealed_reducer_refuses_registration():
    with pytest.raises(InvalidTransitionError):
        ACCOUNT_REDUCER.register(AccountCreated, lambda s, e: s)


def test_reducer_rejects_duplicate_handler():
    r = Reducer()
    r.register(FundsDeposited, lambda s, e: s)

    with pytest.raises(InvalidTransitionError):
        r.register(FundsDeposited, lambda s, e: s)


@dataclass(frozen=True)
class AccountFrozen(Event):
    reason: str


def test_unregistered_variant_fails_loudly():
    with pytest.raises(InvalidTransitionError):
        apply_event(ACTIVE, AccountFrozen(id="e1", ts=1, reason="audit"))
