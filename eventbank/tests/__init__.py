"""
Test suite for the account engine.

Focus areas:
- Transition purity and determinism
- Append-only log and hash chain integrity
- Replay equivalence and consistency failures
- Aggregate atomicity and concurrency
"""
