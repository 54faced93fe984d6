"""
Tests for the append-only event log.
"""

import threading

from eventbank.core.events import AccountCreated, FundsDeposited
from eventbank.log.integrity import ZERO_HASH
from eventbank.log.memory import EventLog


def _deposits(n: int):
    return [FundsDeposited(id=f"d{i}", ts=i, amount=i + 1) for i in range(n)]


def test_empty_log():
    log = EventLog()

    assert len(log) == 0
    assert log.all() == ()
    assert log.last_hash() == ZERO_HASH


def test_append_assigns_sequential_positions():
    log = EventLog()
    results = [log.append(e) for e in _deposits(5)]

    assert [r.seq for r in results] == [0, 1, 2, 3, 4]
    assert log.all() == tuple(_deposits(5))
    assert log.last_hash() == results[-1].event_hash


def test_all_is_an_independent_snapshot():
    """Later appends must not show up in an earlier snapshot."""
    log = EventLog(_deposits(2))
    snap = log.all()

    log.append(AccountCreated(id="c", ts=9, owner="Alice"))

    assert len(snap) == 2
    assert len(log.all()) == 3
    assert isinstance(snap, tuple)


def test_log_never_rejects_events():
    """Validation is the caller's job; the log stores anything it is given."""
    log = EventLog()
    log.append(AccountCreated(id="a", ts=1, owner="Alice"))
    log.append(AccountCreated(id="b", ts=2, owner="Bob"))

    assert len(log) == 2


def test_read_range():
    log = EventLog(_deposits(10))

    assert [e.id for e in log.read(from_seq=3, to_seq=5)] == ["d3", "d4", "d5"]
    assert len(list(log.read())) == 10


def test_prepopulated_log_matches_appended_log():
    a = EventLog(_deposits(4))
    b = EventLog()
    for e in _deposits(4):
        b.append(e)

    assert a.records() == b.records()


def test_concurrent_appends_keep_a_dense_sequence():
    log = EventLog()

    def writer(prefix: str):
        for i in range(200):
            log.append(FundsDeposited(id=f"{prefix}-{i}", ts=i, amount=1))

    threads = [threading.Thread(target=writer, args=(str(t),)) for t in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    recs = log.records()
    assert [r.seq for r in recs] == list(range(800))
    assert len({r.event.id for r in recs}) == 800
