"""
Replay system for deterministic state reconstruction.

Same log -> same state, every time.
"""

from .runner import ReplayResult, replay

__all__ = [
    "ReplayResult",
    "replay",
]
