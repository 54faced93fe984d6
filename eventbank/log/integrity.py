"""
Hash chain integrity.

Each appended event is hashed together with the hash of the event before it,
so any edit, reorder or gap in the history changes every later hash.
"""

import hashlib
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional

from ..core.canonical import canonical_json_bytes
from ..core.errors import IntegrityError
from ..core.events import Event

ZERO_HASH = "0" * 64


@dataclass(frozen=True)
class ChainRecord:
    """
    One position in the log.

    Fields:
        seq: 0-based position
        prev_hash: Hash of the previous record (ZERO_HASH for seq 0)
        event_hash: Hash of this record
        event: The stored event
    """
    seq: int
    prev_hash: str
    event_hash: str
    event: Event

    def to_dict(self) -> Dict[str, Any]:
        return {
            "seq": self.seq,
            "prev_hash": self.prev_hash,
            "event_hash": self.event_hash,
            "event": self.event.to_dict(),
        }


@dataclass(frozen=True)
class ChainVerification:
    valid: bool
    checked: int
    error: Optional[str] = None
    seq: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"valid": self.valid, "checked": self.checked, "error": self.error, "seq": self.seq}


def _event_dict_for_hash(seq: int, event: Event) -> Dict[str, Any]:
    data = event.to_dict()
    data["seq"] = seq
    return data


def hash_event(prev_hash: str, seq: int, event: Event) -> str:
    """
    Hash input: prev_hash + canonical_json(event fields + seq).

    Returns:
        SHA-256 hash as hex string
    """
    b = prev_hash.encode("utf-8") + canonical_json_bytes(_event_dict_for_hash(seq, event))
    return hashlib.sha256(b).hexdigest()


def chain_record(prev_hash: str, seq: int, event: Event) -> ChainRecord:
    return ChainRecord(
        seq=seq,
        prev_hash=prev_hash,
        event_hash=hash_event(prev_hash, seq, event),
        event=event,
    )


def verify_chain(records: Iterable[ChainRecord]) -> ChainVerification:
    """
    Recompute the chain from ZERO_HASH and report the first mismatch.
    """
    prev_hash = ZERO_HASH
    checked = 0
    for expected_seq, rec in enumerate(records):
        if rec.seq != expected_seq:
            return ChainVerification(False, checked, "seq gap", rec.seq)
        if rec.prev_hash != prev_hash:
            return ChainVerification(False, checked, "prev_hash mismatch", rec.seq)
        if rec.event_hash != hash_event(prev_hash, rec.seq, rec.event):
            return ChainVerification(False, checked, "event_hash mismatch", rec.seq)
        prev_hash = rec.event_hash
        checked += 1
    return ChainVerification(True, checked)


def require_valid_chain(records: Iterable[ChainRecord]) -> int:
    """
    Like verify_chain() but raises.

    Returns:
        Number of records checked

    Raises:
        IntegrityError: On the first broken link
    """
    result = verify_chain(records)
    if not result.valid:
        raise IntegrityError(f"{result.error} at seq {result.seq}")
    return result.checked
