"""
Spin & Solve - Event Definitions

Event types and payloads published by a game session so the presentation
layer can refresh without polling.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class GameEvent(Enum):
    """Events that can occur during a round."""

    ROUND_STARTED = auto()
    SPIN_STARTED = auto()
    WHEEL_LANDED = auto()
    LETTER_GUESSED = auto()
    PHRASE_UPDATED = auto()
    GEMS_CHANGED = auto()
    FREE_HINTS_CHANGED = auto()
    HINT_REVEALED = auto()
    TIMER_UPDATED = auto()
    SOLVE_FAILED = auto()
    ROUND_WON = auto()
    ROUND_TIMED_OUT = auto()
    ROUND_ABORTED = auto()


@dataclass
class EventPayload:
    """Wrapper for event data."""

    event: GameEvent
    round_number: int = 0
    data: dict[str, Any] = field(default_factory=dict)


# Round-ending events, keyed by the status name that triggers them
_TERMINAL_EVENT_MAP: dict[str, GameEvent] = {
    "WON": GameEvent.ROUND_WON,
    "TIMED_OUT": GameEvent.ROUND_TIMED_OUT,
    "PLAYER_ABORTED": GameEvent.ROUND_ABORTED,
}


def terminal_event_for(status_name: str) -> GameEvent | None:
    """Return the event announcing a round status, if it ends the round."""
    return _TERMINAL_EVENT_MAP.get(status_name)


def is_terminal_event(event: GameEvent) -> bool:
    return event in _TERMINAL_EVENT_MAP.values()
