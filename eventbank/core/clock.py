"""
Clock capabilities.

The aggregate only stamps events with `now()`; it never branches on time.
Timestamps are plain integers so replayed histories compare exactly.
"""

import threading
import time
from dataclasses import dataclass
from typing import Protocol


class Clock(Protocol):
    def now(self) -> int:
        ...


class SystemClock:
    """Wall clock in nanoseconds since the epoch."""

    def now(self) -> int:
        return time.time_ns()


class SteppingClock:
    """
    Logical clock that advances by `step` on every read.

    Thread-safe, so concurrent callers never receive the same tick.
    """

    def __init__(self, start: int = 0, step: int = 1) -> None:
        if step <= 0:
            raise ValueError("step must be positive")
        self._next = start
        self._step = step
        self._lock = threading.Lock()

    def now(self) -> int:
        with self._lock:
            current = self._next
            self._next += self._step
            return current


@dataclass(frozen=True)
class DeterministicClock:
    """
    Fixed time source.

    `now()` never moves; `tick()` returns a new clock further along.
    Handy when a test wants every event stamped with a known value.
    """
    current: int = 0

    def now(self) -> int:
        return self.current

    def tick(self, step: int = 1) -> "DeterministicClock":
        return DeterministicClock(self.current + step)
