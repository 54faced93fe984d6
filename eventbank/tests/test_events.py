"""
Tests for the event model.
"""

import dataclasses

import pytest

from eventbank.core.errors import InvalidTransitionError, UsageError
from eventbank.core.events import (
    EVENT_TYPES,
    AccountCreated,
    FundsDeposited,
    FundsWithdrawn,
    event_from_dict,
)


def test_events_are_immutable():
    e = FundsDeposited(id="e1", ts=1, amount=10)

    with pytest.raises(dataclasses.FrozenInstanceError):
        e.amount = 20  # type: ignore[misc]
    with pytest.raises(dataclasses.FrozenInstanceError):
        e.id = "other"  # type: ignore[misc]


def test_event_type_and_payload():
    e = AccountCreated(id="e1", ts=7, owner="Alice")

    assert e.type == "AccountCreated"
    assert e.payload() == {"owner": "Alice"}
    assert e.to_dict() == {"type": "AccountCreated", "id": "e1", "ts": 7, "payload": {"owner": "Alice"}}


@pytest.mark.parametrize("cls", [FundsDeposited, FundsWithdrawn])
@pytest.mark.parametrize("amount", [0, -5, True, 1.5, "10"])
def test_bad_amounts_rejected_at_construction(cls, amount):
    with pytest.raises(UsageError):
        cls(id="e1", ts=1, amount=amount)


@pytest.mark.parametrize("owner", ["", "   ", None, 42])
def test_bad_owner_rejected_at_construction(owner):
    with pytest.raises(UsageError):
        AccountCreated(id="e1", ts=1, owner=owner)


def test_event_from_dict_restores_every_variant():
    originals = [
        AccountCreated(id="a", ts=1, owner="Alice"),
        FundsDeposited(id="b", ts=2, amount=500),
        FundsWithdrawn(id="c", ts=3, amount=120),
    ]

    restored = [event_from_dict(e.to_dict()) for e in originals]

    assert restored == originals
    assert {type(e) for e in restored} == set(EVENT_TYPES)


def test_event_from_dict_rejects_unknown_type():
    with pytest.raises(InvalidTransitionError):
        event_from_dict({"type": "AccountClosed", "id": "x", "ts": 1, "payload": {}})


def test_event_from_dict_validates_payload():
    with pytest.raises(UsageError):
        event_from_dict({"type": "FundsDeposited", "id": "x", "ts": 1, "payload": {"amount": -1}})
