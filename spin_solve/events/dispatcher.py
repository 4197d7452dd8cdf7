"""
Spin & Solve - Event Dispatcher

Fan-out of session events to subscribed callbacks. A failing subscriber
is logged and skipped so it can never break the game state machine.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable

from spin_solve.events.types import EventPayload, GameEvent

logger = logging.getLogger(__name__)

EventHandler = Callable[[EventPayload], None]


class EventDispatcher:
    """Routes EventPayloads to subscribers.

    Handlers subscribe either to every event or to a chosen set of
    events. Handlers run synchronously on the publishing thread.
    """

    def __init__(self) -> None:
        self._handlers: list[tuple[EventHandler, frozenset[GameEvent] | None]] = []
        self._lock = threading.Lock()

    def subscribe(
        self,
        handler: EventHandler,
        events: set[GameEvent] | frozenset[GameEvent] | None = None,
    ) -> None:
        """Register a handler.

        Args:
            handler: Callback receiving an EventPayload.
            events: Only deliver these events. None means all events.
        """
        with self._lock:
            if any(existing is handler for existing, _ in self._handlers):
                logger.warning("Handler %r is already subscribed", handler)
                return
            filter_set = frozenset(events) if events is not None else None
            self._handlers.append((handler, filter_set))

    def unsubscribe(self, handler: EventHandler) -> None:
        with self._lock:
            self._handlers = [
                (existing, filt) for existing, filt in self._handlers
                if existing is not handler
            ]

    def clear(self) -> None:
        with self._lock:
            self._handlers.clear()

    @property
    def subscriber_count(self) -> int:
        return len(self._handlers)

    def publish(
        self,
        event: GameEvent,
        round_number: int = 0,
        **data: Any,
    ) -> EventPayload:
        """Build a payload and deliver it to matching handlers."""
        payload = EventPayload(event=event, round_number=round_number, data=data)
        self.dispatch(payload)
        return payload

    def dispatch(self, payload: EventPayload) -> None:
        with self._lock:
            handlers = list(self._handlers)

        for handler, filt in handlers:
            if filt is not None and payload.event not in filt:
                continue
            try:
                handler(payload)
            except Exception:
                logger.exception("Error handling event %s", payload.event.name)
