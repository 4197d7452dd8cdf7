"""
Spin & Solve - Game Engine Base Classes

This module defines the foundational data structures, enums and error types
used throughout the game engine. Value objects are immutable (frozen
dataclasses) so they can be handed to the presentation layer safely.
"""

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Sequence


VOWELS = frozenset("AEIOU")

# Upper bound on hints revealed for one phrase
MAX_HINTS_PER_PHRASE = 3


class Difficulty(Enum):
    """Difficulty tiers. Values double as phrase library tier names."""
    EASY = "easy"
    HARD = "hard"


class RoundStatus(Enum):
    """Overall state of a round."""
    ACTIVE = auto()
    WON = auto()
    TIMED_OUT = auto()
    PLAYER_ABORTED = auto()


class TurnPhase(Enum):
    """Where the round is within a spin-then-guess action."""
    AWAITING_SPIN = auto()
    SPINNING = auto()
    AWAITING_LETTER = auto()


class RewardKind(Enum):
    """Kinds of reward a wheel segment can carry."""
    GEMS = auto()
    TIME_PENALTY = auto()
    FREE_HINT = auto()
    NO_PRIZE = auto()


class ErrorKind(Enum):
    """Recoverable rule violations reported back to the host."""
    WRONG_LENGTH = auto()
    NOT_A_LETTER = auto()
    VOWEL_NOT_ALLOWED = auto()
    NOT_A_VOWEL = auto()
    ALREADY_GUESSED = auto()
    INSUFFICIENT_FUNDS = auto()
    HINT_EXHAUSTED = auto()
    SPIN_IN_FLIGHT = auto()
    INVALID_STATE = auto()


# =============================================================================
# ERRORS
# =============================================================================

class GameRuleError(ValueError):
    """Base class for game rule violations. Always recoverable."""

    kind: ErrorKind = ErrorKind.INVALID_STATE

    def __init__(self, message: str, kind: ErrorKind | None = None) -> None:
        super().__init__(message)
        if kind is not None:
            self.kind = kind


class LetterValidationError(GameRuleError):
    """A submitted letter failed validation. The caller may re-prompt."""


class InsufficientFundsError(GameRuleError):
    kind = ErrorKind.INSUFFICIENT_FUNDS


class HintExhaustedError(GameRuleError):
    kind = ErrorKind.HINT_EXHAUSTED


class SpinInFlightError(GameRuleError):
    kind = ErrorKind.SPIN_IN_FLIGHT


class InvalidStateError(GameRuleError):
    kind = ErrorKind.INVALID_STATE


# =============================================================================
# VALUE OBJECTS
# =============================================================================

_GEMS_LABEL = re.compile(r"^\s*(\d+)\s+gems?\s*$", re.IGNORECASE)
_PENALTY_LABEL = re.compile(r"^\s*-\s*(\d+)\s*(?:s|sec|secs|seconds?)\s*$", re.IGNORECASE)
_FREE_HINT_LABEL = re.compile(r"^\s*free\s+hint\s*$", re.IGNORECASE)


@dataclass(frozen=True)
class Phrase:
    """
    A secret phrase selected for a round.

    Attributes:
        text: The phrase as stored (original case preserved)
        category: Category shown to the player
        hints: Ordered hints, revealed one at a time
    """
    text: str
    category: str = ""
    hints: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.text.strip():
            raise ValueError("Phrase text cannot be empty.")

    @classmethod
    def from_parts(
        cls,
        text: str,
        category: str = "",
        hints: Sequence[str] = (),
    ) -> "Phrase":
        """Create a Phrase from any hint sequence type."""
        return cls(text=text, category=category, hints=tuple(hints))


@dataclass(frozen=True)
class WheelSegment:
    """
    One reward slot on the wheel.

    Attributes:
        kind: What landing here does
        amount: Gems credited or seconds docked (0 for other kinds)
        label: Display text
    """
    kind: RewardKind
    amount: int = 0
    label: str = ""

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError(f"Segment amount cannot be negative, got {self.amount}.")

    @classmethod
    def from_label(cls, label: str) -> "WheelSegment":
        """Parse a configuration label such as "3 gems" or "-10 seconds"."""
        match = _GEMS_LABEL.match(label)
        if match:
            return cls(RewardKind.GEMS, int(match.group(1)), label)

        match = _PENALTY_LABEL.match(label)
        if match:
            return cls(RewardKind.TIME_PENALTY, int(match.group(1)), label)

        if _FREE_HINT_LABEL.match(label):
            return cls(RewardKind.FREE_HINT, 0, label)

        return cls(RewardKind.NO_PRIZE, 0, label)

    @property
    def is_penalty(self) -> bool:
        return self.kind == RewardKind.TIME_PENALTY

    def __str__(self) -> str:
        return self.label or self.kind.name.replace("_", " ").title()


@dataclass(frozen=True)
class SpinResult:
    """
    Where a spin came to rest.

    Attributes:
        segment_index: Index into the wheel's segment list
        segment: The landed segment
        angle: Final wheel rotation, normalized to [0, 360)
    """
    segment_index: int
    segment: WheelSegment
    angle: float


# =============================================================================
# OPERATION OUTCOMES
# =============================================================================

@dataclass(frozen=True)
class SpinOutcome:
    """
    Result of requesting, resolving or interrupting a spin.

    Attributes:
        end_angle: Target rotation for the host animation (spin requests)
        result: Landed segment (resolve / stop early)
        status: Round status after the operation
        error: Set when the request was rejected
        message: Human-readable reason for a rejection
    """
    end_angle: float | None = None
    result: SpinResult | None = None
    status: RoundStatus | None = None
    error: ErrorKind | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class GuessOutcome:
    """
    Result of a letter guess (wheel consonant or purchased vowel).

    Attributes:
        letter: Normalized letter that was tried (empty when rejected)
        found: Whether the letter occurs in the phrase
        seconds_docked: Time removed by a penalty segment
        status: Round status after the guess
        error: Set when the guess was rejected before being processed
        message: Human-readable reason for a rejection
    """
    letter: str = ""
    found: bool = False
    seconds_docked: int = 0
    status: RoundStatus | None = None
    error: ErrorKind | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class HintOutcome:
    """
    Result of buying a hint.

    Attributes:
        hint: The revealed hint text
        used_free_hint: True if a banked free hint paid for it
        hints_used: Hints used for this phrase after the purchase
        error: Set when the purchase was rejected
        message: Human-readable reason for a rejection
    """
    hint: str | None = None
    used_free_hint: bool = False
    hints_used: int = 0
    error: ErrorKind | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class SolveOutcome:
    """
    Result of an attempt to solve the whole phrase.

    Attributes:
        won: True on an exact (case-insensitive) match
        seconds_docked: Time removed for a wrong attempt
        status: Round status after the attempt
        error: Set when the attempt was rejected
        message: Human-readable reason for a rejection
    """
    won: bool = False
    seconds_docked: int = 0
    status: RoundStatus | None = None
    error: ErrorKind | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None
