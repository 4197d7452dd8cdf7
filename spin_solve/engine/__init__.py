"""
Spin & Solve Game Engine.

Pure Python game logic with zero UI dependencies.
Handles phrase reveal, the reward wheel, gems, the round timer and hints.
"""

from spin_solve.engine.base import (
    Difficulty,
    ErrorKind,
    GameRuleError,
    GuessOutcome,
    HintOutcome,
    Phrase,
    RewardKind,
    RoundStatus,
    SolveOutcome,
    SpinOutcome,
    SpinResult,
    TurnPhase,
    WheelSegment,
)
from spin_solve.engine.economy import GemWallet
from spin_solve.engine.phrase import PhraseState
from spin_solve.engine.session import GameSession, RoundRules
from spin_solve.engine.timer import RoundTimer
from spin_solve.engine.wheel import Wheel

__all__ = [
    # Data Classes
    "Phrase",
    "WheelSegment",
    "SpinResult",
    "SpinOutcome",
    "GuessOutcome",
    "HintOutcome",
    "SolveOutcome",
    # Enums
    "Difficulty",
    "ErrorKind",
    "RewardKind",
    "RoundStatus",
    "TurnPhase",
    # Errors
    "GameRuleError",
    # Components
    "GameSession",
    "GemWallet",
    "PhraseState",
    "RoundRules",
    "RoundTimer",
    "Wheel",
]
