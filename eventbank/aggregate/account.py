"""
Account aggregate root.

Binds one EventLog to one cached AccountState. Every intent runs
validate-then-append under the aggregate lock:

1. build the event from the intent plus an injected id and timestamp
2. fold it over the cached state (a rejection stops here, nothing changes)
3. append it to the log and adopt the new state

At every observation point the cached state equals replay(log).state.
"""

import threading
from typing import Callable, Optional, Tuple

from ..core.canonical import canonical_hash
from ..core.clock import Clock
from ..core.errors import ConsistencyError, InvariantViolation, UsageError
from ..core.events import AccountCreated, Event, FundsDeposited, FundsWithdrawn
from ..core.ids import IdGenerator
from ..core.reducer import Reducer
from ..core.state import AccountState
from ..core.transition import ACCOUNT_REDUCER
from ..log.integrity import ChainRecord
from ..log.memory import EventLog
from ..log.store import EventStore
from ..logging_config import get_logger
from ..replay.runner import replay as replay_log

EventFactory = Callable[[str, int], Event]


def _check_amount(amount: object) -> int:
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise UsageError(f"amount must be an integer, got {amount!r}")
    if amount <= 0:
        raise UsageError(f"amount must be positive, got {amount}")
    return amount


class Account:
    """
    Event-sourced account.

    Usage:
        account = Account(SequentialIdGenerator(), SteppingClock())
        account.create("Alice")
        account.deposit(500)
        account.withdraw(120)
        account.snapshot()  # AccountState(owner="Alice", balance=380, active=True)
    """

    def __init__(
        self,
        id_generator: IdGenerator,
        clock: Clock,
        log: Optional[EventStore] = None,
        reducer: Optional[Reducer] = None,
        account_id: str = "account",
    ) -> None:
        """
        Args:
            id_generator: Source of event ids
            clock: Source of event timestamps
            log: Existing history to reconstruct from (default: empty log)
            reducer: Transition handlers (default: ACCOUNT_REDUCER)
            account_id: Name used as trace_id in logs and in audit reports

        Raises:
            ConsistencyError: If a pre-populated log does not replay
        """
        self.account_id = account_id
        self._ids = id_generator
        self._clock = clock
        self._log = log if log is not None else EventLog()
        self._reducer = reducer or ACCOUNT_REDUCER
        self._lock = threading.RLock()
        self._state: Optional[AccountState] = AccountState.initial()
        self._fault: Optional[ConsistencyError] = None
        self.logger = get_logger(__name__, trace_id=account_id)

        if len(self._log):
            self.replay()

    # Intents

    def create(self, owner: str) -> Event:
        if not isinstance(owner, str) or not owner.strip():
            raise UsageError(f"owner must be a non-empty string, got {owner!r}")
        return self._execute(lambda event_id, ts: AccountCreated(id=event_id, ts=ts, owner=owner))

    def deposit(self, amount: int) -> Event:
        amount = _check_amount(amount)
        return self._execute(lambda event_id, ts: FundsDeposited(id=event_id, ts=ts, amount=amount))

    def withdraw(self, amount: int) -> Event:
        amount = _check_amount(amount)
        return self._execute(lambda event_id, ts: FundsWithdrawn(id=event_id, ts=ts, amount=amount))

    def _execute(self, factory: EventFactory) -> Event:
        with self._lock:
            current = self.snapshot()
            event = factory(self._ids.next(), self._clock.now())
            try:
                new_state = self._reducer.apply(current, event)
            except InvariantViolation as ex:
                self.logger.info(f"Rejected {event.type}: {ex}")
                raise
            rec = self._log.append(event)
            self._state = new_state
            self.logger.debug(f"Appended {event.type} {event.id} at seq {rec.seq}")
            return event

    # Reconstruction

    def replay(self) -> AccountState:
        """
        Discard the cache and rebuild it from the full log.

        Raises:
            ConsistencyError: If any historical event is rejected. The account
                is then marked faulted and refuses further use.
        """
        with self._lock:
            try:
                result = replay_log(self._log, self._reducer)
            except ConsistencyError as ex:
                self._fault = ex
                self._state = None
                self.logger.error(f"Replay failed, account marked inconsistent: {ex}")
                raise
            self._fault = None
            self._state = result.state
            self.logger.debug(f"Replayed {result.applied} events")
            return result.state

    def state_at(self, seq: int) -> AccountState:
        """State right after the event at seq (inclusive). Does not touch the cache."""
        if seq < 0:
            raise UsageError(f"seq must be >= 0, got {seq}")
        return replay_log(self._log, self._reducer, to_seq=seq).state

    # Observation

    def snapshot(self) -> AccountState:
        """
        Current cached state.

        Raises:
            ConsistencyError: If the last replay failed
        """
        state = self._state
        if state is None:
            raise self._fault_error()
        return state

    @property
    def is_consistent(self) -> bool:
        return self._state is not None

    @property
    def version(self) -> int:
        """Number of events in the log."""
        return len(self._log)

    def history(self) -> Tuple[Event, ...]:
        return self._log.all()

    def records(self) -> Tuple[ChainRecord, ...]:
        return self._log.records()

    def state_hash(self) -> str:
        return canonical_hash(self.snapshot().to_dict())

    def publish(self, sink) -> int:
        """
        Hand the current record snapshot to an AuditSink.

        Returns:
            Number of records published
        """
        recs = self._log.records()
        sink.write(recs)
        return len(recs)

    def _fault_error(self) -> ConsistencyError:
        err = ConsistencyError(
            f"account {self.account_id} is inconsistent after a failed replay",
            seq=self._fault.seq if self._fault else None,
            event_id=self._fault.event_id if self._fault else None,
        )
        err.__cause__ = self._fault
        return err
