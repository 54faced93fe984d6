"""
Replay runner: reconstruct account state from the event log.

Replay is pure: the reducer is folded over a snapshot of the log in
sequence order, starting from the empty state.
"""

from dataclasses import dataclass
from typing import Optional

from ..core.errors import ConsistencyError, InvalidTransitionError, InvariantViolation
from ..core.reducer import Reducer
from ..core.state import AccountState
from ..core.transition import ACCOUNT_REDUCER
from ..log.store import EventStore


@dataclass(frozen=True)
class ReplayResult:
    """
    Result of replay operation.

    Fields:
        state: Final state after applying events
        applied: Number of events applied
    """
    state: AccountState
    applied: int


def replay(
    store: EventStore,
    reducer: Reducer = ACCOUNT_REDUCER,
    to_seq: Optional[int] = None,
) -> ReplayResult:
    """
    Replay events to reconstruct state.

    Args:
        store: Event log to read from
        reducer: Reducer with registered handlers
        to_seq: Stop at this sequence (inclusive, None = all)

    Returns:
        ReplayResult with final state and count

    Raises:
        ConsistencyError: If a historical event is rejected; the cause is chained
    """
    st = AccountState.initial()
    count = 0

    for rec in store.records():
        if to_seq is not None and rec.seq > to_seq:
            break
        try:
            st = reducer.apply(st, rec.event)
        except (InvariantViolation, InvalidTransitionError) as ex:
            raise ConsistencyError(
                f"event {rec.event.type} {rec.event.id} at seq {rec.seq} rejected on replay: {ex}",
                seq=rec.seq,
                event_id=rec.event.id,
            ) from ex
        count += 1

    return ReplayResult(state=st, applied=count)
