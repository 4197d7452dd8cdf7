"""
Spin & Solve Events.

State-change notifications from the game session to the presentation layer.
"""

from spin_solve.events.dispatcher import EventDispatcher
from spin_solve.events.types import EventPayload, GameEvent

__all__ = [
    "EventDispatcher",
    "EventPayload",
    "GameEvent",
]
