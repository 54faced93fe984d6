"""
Event storage and integrity verification.

- EventStore: Abstract append-only log interface
- EventLog: In-memory hash-chained implementation
- Integrity: Hash chain records and verification
"""

from .store import EventStore
from .memory import EventLog
from .integrity import (
    ZERO_HASH,
    ChainRecord,
    ChainVerification,
    hash_event,
    chain_record,
    verify_chain,
    require_valid_chain,
)

__all__ = [
    "EventStore",
    "EventLog",
    "ZERO_HASH",
    "ChainRecord",
    "ChainVerification",
    "hash_event",
    "chain_record",
    "verify_chain",
    "require_valid_chain",
]
