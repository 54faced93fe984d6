"""
Wires injected capabilities into an Account from Settings.
"""

from typing import Optional

from .aggregate.account import Account
from .config import Settings
from .core.clock import Clock, SteppingClock, SystemClock
from .core.ids import IdGenerator, SequentialIdGenerator, UuidIdGenerator
from .log.store import EventStore


def build_clock(settings: Settings) -> Clock:
    if settings.clock == "stepping":
        return SteppingClock()
    return SystemClock()


def build_id_generator(settings: Settings) -> IdGenerator:
    if settings.id_mode == "sequential":
        return SequentialIdGenerator(namespace=settings.id_namespace)
    return UuidIdGenerator()


def build_account(
    settings: Optional[Settings] = None,
    account_id: str = "account",
    log: Optional[EventStore] = None,
) -> Account:
    settings = settings or Settings.from_env()
    return Account(
        build_id_generator(settings),
        build_clock(settings),
        log=log,
        account_id=account_id,
    )
