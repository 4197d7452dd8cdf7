"""
Spin & Solve - Round Timer

Countdown in whole seconds. Ticks and penalties both reduce it and it
never drops below zero.
"""

from typing import ClassVar

from spin_solve.engine.validators import validate_seconds


class RoundTimer:
    """Seconds remaining in the current round."""

    LOW_TIME_THRESHOLD: ClassVar[int] = 12

    def __init__(self, seconds: int) -> None:
        self._remaining = validate_seconds(seconds)

    @property
    def remaining(self) -> int:
        return self._remaining

    @property
    def is_expired(self) -> bool:
        return self._remaining == 0

    @property
    def is_running_low(self) -> bool:
        """True when the host should show the timer as a warning."""
        return self._remaining < self.LOW_TIME_THRESHOLD

    def reset(self, seconds: int) -> None:
        self._remaining = validate_seconds(seconds)

    def tick(self) -> int:
        """Count down one second. Returns the seconds left."""
        return self.penalize(1)

    def penalize(self, seconds: int) -> int:
        """Dock time, clamped at zero. Returns the seconds left."""
        seconds = validate_seconds(seconds)
        self._remaining = max(0, self._remaining - seconds)
        return self._remaining

    def formatted(self) -> str:
        """Render as M:SS."""
        minutes, seconds = divmod(self._remaining, 60)
        return f"{minutes}:{seconds:02d}"

    def __str__(self) -> str:
        return self.formatted()
