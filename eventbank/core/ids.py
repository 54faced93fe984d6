"""
Identifier capabilities.

Event ids only need to be unique for the lifetime of the process.
"""

import hashlib
import itertools
import threading
import uuid
from typing import Protocol


class IdGenerator(Protocol):
    def next(self) -> str:
        ...


def stable_id(*parts: str) -> str:
    """
    Generate stable ID derived from inputs (no randomness).

    Example:
        stable_id("eventbank", "7") -> "3c1e..."
    """
    raw = "|".join(parts).encode("utf-8")
    return hashlib.sha256(raw).hexdigest()


class SequentialIdGenerator:
    """
    Deterministic ids: stable_id(namespace, n) for n = start, start+1, ...

    Two generators with the same namespace and start yield the same ids, which
    keeps test histories reproducible.
    """

    def __init__(self, namespace: str = "eventbank", start: int = 0) -> None:
        self.namespace = namespace
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def next(self) -> str:
        with self._lock:
            n = next(self._counter)
        return stable_id(self.namespace, str(n))


class UuidIdGenerator:
    """Random UUID4 hex ids."""

    def next(self) -> str:
        return uuid.uuid4().hex
