"""
EventStore abstract interface.

Defines the contract every event log implementation honours. Only the
in-memory EventLog ships here; a persistent store would implement the same
methods and add its own I/O failure handling.
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional, Tuple

from ..core.events import Event
from .integrity import ZERO_HASH, ChainRecord


class EventStore(ABC):
    """
    Append-only, ordered event storage.

    All implementations must guarantee:
    - Append-only (no updates, no deletes)
    - Sequential ordering (events indexed by seq, starting at 0)
    - Snapshots returned by all()/records() are unaffected by later appends
    """

    @abstractmethod
    def append(self, event: Event) -> ChainRecord:
        """
        Append event at the end of the log.

        No domain validation happens here; the caller validates first.

        Returns:
            ChainRecord with the assigned seq and hashes
        """
        ...

    @abstractmethod
    def records(self) -> Tuple[ChainRecord, ...]:
        """Immutable snapshot of every chain record in append order."""
        ...

    def all(self) -> Tuple[Event, ...]:
        """Immutable snapshot of every event in append order."""
        return tuple(rec.event for rec in self.records())

    def read(self, from_seq: int = 0, to_seq: Optional[int] = None) -> Iterator[Event]:
        """
        Yield events from a snapshot.

        Args:
            from_seq: First sequence number (inclusive)
            to_seq: Last sequence number (inclusive, None = all)
        """
        for rec in self.records():
            if rec.seq < from_seq:
                continue
            if to_seq is not None and rec.seq > to_seq:
                break
            yield rec.event

    def last_hash(self) -> str:
        recs = self.records()
        return recs[-1].event_hash if recs else ZERO_HASH

    def __len__(self) -> int:
        return len(self.records())
