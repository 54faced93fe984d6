"""
Event-sourced Account Engine

Account state derived purely from an append-only, hash-chained event history.
"""

__version__ = "0.1.0"
