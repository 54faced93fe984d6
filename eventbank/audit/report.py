"""
Audit report for a single account.

Checks the hash chain, re-derives state from the log and compares it with
the aggregate's cached snapshot.
"""

from collections import Counter
from typing import Any, Dict

from ..aggregate.account import Account
from ..core.canonical import canonical_hash
from ..core.errors import ConsistencyError
from ..log.integrity import verify_chain
from ..log.memory import EventLog
from ..replay.runner import replay


def build_audit_report(account: Account) -> Dict[str, Any]:
    """
    Summarize an account's history.

    Meant for a quiescent account; an intent landing mid-report can make
    replay_matches False.

    Keys:
        account_id, events, event_counts, chain, state, state_hash,
        replay_matches, replay_error
    """
    records = account.records()
    counts = Counter(rec.event.type for rec in records)

    report: Dict[str, Any] = {
        "account_id": account.account_id,
        "events": len(records),
        "event_counts": dict(sorted(counts.items())),
        "chain": verify_chain(records).to_dict(),
        "state": None,
        "state_hash": None,
        "replay_matches": False,
        "replay_error": None,
    }

    try:
        cached = account.snapshot()
        derived = replay(EventLog(rec.event for rec in records)).state
    except ConsistencyError as ex:
        report["replay_error"] = str(ex)
        return report

    report["state"] = cached.to_dict()
    report["state_hash"] = canonical_hash(cached.to_dict())
    report["replay_matches"] = derived == cached
    return report
