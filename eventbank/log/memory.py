"""
In-memory append-only event log.
"""

import threading
from typing import Iterable, List, Optional, Tuple

from ..core.events import Event
from .integrity import ZERO_HASH, ChainRecord, chain_record
from .store import EventStore


class EventLog(EventStore):
    """
    List-backed, hash-chained event log.

    Guarantees:
    - Append-only (records are never replaced or removed)
    - Readers always get a whole prefix, never a half-written append
    - Returned tuples are independent of the log's internal list
    """

    def __init__(self, events: Optional[Iterable[Event]] = None) -> None:
        """
        Args:
            events: Existing history to load, chained in the given order
        """
        self._records: List[ChainRecord] = []
        self._lock = threading.Lock()
        for event in events or ():
            self.append(event)

    def append(self, event: Event) -> ChainRecord:
        with self._lock:
            seq = len(self._records)
            prev_hash = self._records[-1].event_hash if self._records else ZERO_HASH
            rec = chain_record(prev_hash, seq, event)
            self._records.append(rec)
            return rec

    def records(self) -> Tuple[ChainRecord, ...]:
        with self._lock:
            return tuple(self._records)

    def last_hash(self) -> str:
        with self._lock:
            return self._records[-1].event_hash if self._records else ZERO_HASH

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
