"""
Reducer: registry of pure state transition handlers.

Handlers must be:
- Pure (no side effects, no I/O)
- Deterministic (same input -> same output)
- Non-mutating (return a new state, never edit the one passed in)
"""

from typing import Any, Callable, Dict, Iterable, Type

from .events import Event
from .errors import InvalidTransitionError

# Handler signature: (current_state, event) -> new_state
Handler = Callable[[Any, Event], Any]


class Reducer:
    """
    Registry of event handlers keyed by event class.

    Usage:
        reducer = Reducer()
        reducer.register(AccountCreated, on_account_created)
        reducer.seal(EVENT_TYPES)
        new_state = reducer.apply(state, event)
    """

    def __init__(self) -> None:
        self._handlers: Dict[Type[Event], Handler] = {}
        self._sealed = False

    @property
    def sealed(self) -> bool:
        return self._sealed

    def register(self, event_cls: Type[Event], handler: Handler) -> None:
        """
        Register a handler for one event class.

        Raises:
            InvalidTransitionError: If the reducer is sealed or the class
                already has a handler
        """
        if self._sealed:
            raise InvalidTransitionError("Reducer is sealed")
        if event_cls in self._handlers:
            raise InvalidTransitionError(f"Handler already registered for {event_cls.__name__}")
        self._handlers[event_cls] = handler

    def seal(self, variants: Iterable[Type[Event]]) -> "Reducer":
        """
        Check that every variant has a handler and freeze the registry.

        Raises:
            InvalidTransitionError: Naming each variant without a handler
        """
        missing = [cls.__name__ for cls in variants if cls not in self._handlers]
        if missing:
            raise InvalidTransitionError(f"No handler for event types: {', '.join(missing)}")
        self._sealed = True
        return self

    def apply(self, state: Any, event: Event) -> Any:
        """
        Apply event to state using its registered handler.

        Raises:
            InvalidTransitionError: If no handler is registered for the event type
            InvariantViolation: Propagated unchanged from the handler
        """
        handler = self._handlers.get(type(event))
        if handler is None:
            raise InvalidTransitionError(f"No handler for event type: {event.type}")
        return handler(state, event)
