"""
Spin & Solve - Game Session

The round state machine. A session owns the phrase, wheel, gem wallet and
timer for one player and applies the game rules to every host action:

    request_spin -> resolve_spin / stop_spin_early -> submit_letter_guess

with buy_vowel, buy_hint, solve_phrase and tick available at any point
of an active round. Rule violations never raise; they come back as an
outcome whose ``error`` names the ErrorKind, and the round carries on.
A round only ends by being won, timing out, or being aborted.

All public operations are serialized by one lock, so a host may call
tick() from a timer thread.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, Protocol

from spin_solve.engine.base import (
    Difficulty,
    GameRuleError,
    GuessOutcome,
    HintExhaustedError,
    HintOutcome,
    InsufficientFundsError,
    InvalidStateError,
    MAX_HINTS_PER_PHRASE,
    Phrase,
    RewardKind,
    RoundStatus,
    SolveOutcome,
    SpinInFlightError,
    SpinOutcome,
    SpinResult,
    TurnPhase,
    WheelSegment,
)
from spin_solve.engine.economy import GemWallet
from spin_solve.engine.phrase import PhraseState
from spin_solve.engine.timer import RoundTimer
from spin_solve.engine.validators import (
    validate_consonant_guess,
    validate_difficulty,
    validate_vowel_guess,
)
from spin_solve.engine.wheel import Wheel
from spin_solve.events.dispatcher import EventDispatcher
from spin_solve.events.types import GameEvent, terminal_event_for

logger = logging.getLogger(__name__)


class PhraseSource(Protocol):
    """Anything that can hand out a phrase for a difficulty tier."""

    def get_random_phrase(self, tier: Difficulty | str) -> Phrase: ...


@dataclass(frozen=True)
class RoundRules:
    """
    Tunable numbers of the game.

    Attributes:
        easy_round_seconds: Starting time on easy
        hard_round_seconds: Starting time on hard
        vowel_cost: Gems charged per vowel
        hint_cost: Gems charged per hint when no free hint is used
        max_hints: Hints allowed per phrase
        solve_penalty_seconds: Time lost for a wrong solve attempt
        reward_on_correct_guess: Hold gem and free-hint rewards back until
            the follow-up letter is found, instead of crediting on landing
    """
    easy_round_seconds: int = 120
    hard_round_seconds: int = 180
    vowel_cost: int = 3
    hint_cost: int = 5
    max_hints: int = 3
    solve_penalty_seconds: int = 5
    reward_on_correct_guess: bool = False

    def __post_init__(self) -> None:
        if not 0 <= self.max_hints <= MAX_HINTS_PER_PHRASE:
            raise ValueError(
                f"max_hints must be between 0 and {MAX_HINTS_PER_PHRASE}, got {self.max_hints}."
            )

    def round_seconds(self, difficulty: Difficulty) -> int:
        if difficulty == Difficulty.HARD:
            return self.hard_round_seconds
        return self.easy_round_seconds

    @classmethod
    def from_settings(cls, settings: Any) -> "RoundRules":
        """Build rules from a Settings object (or anything with the same fields)."""
        return cls(
            easy_round_seconds=settings.easy_round_seconds,
            hard_round_seconds=settings.hard_round_seconds,
            vowel_cost=settings.vowel_cost,
            hint_cost=settings.hint_cost,
            max_hints=settings.max_hints,
            solve_penalty_seconds=settings.solve_penalty_seconds,
            reward_on_correct_guess=settings.reward_on_correct_guess,
        )


class GameSession:
    """
    One player's game: rounds, wheel, gems and timer.

    Attributes:
        rules: Costs, durations and budgets in force
        wheel: The prize wheel
        wallet: The gem balance
        events: Dispatcher that presentation code subscribes to
    """

    def __init__(
        self,
        library: PhraseSource,
        *,
        rules: RoundRules | None = None,
        wheel: Wheel | None = None,
        wallet: GemWallet | None = None,
        events: EventDispatcher | None = None,
    ) -> None:
        self.library = library
        self.rules = rules or RoundRules()
        self.wheel = wheel or Wheel()
        self.wallet = wallet or GemWallet()
        self.events = events or EventDispatcher()

        self._lock = threading.RLock()
        self._round_number = 0
        self._difficulty = Difficulty.EASY
        self._status: RoundStatus | None = None
        self._phase = TurnPhase.AWAITING_SPIN
        self._phrase_state: PhraseState | None = None
        self._timer = RoundTimer(0)
        # dict keeps guess order
        self._guessed: dict[str, None] = {}
        self._hints_used = 0
        self._free_hints = 0
        self._last_spin: SpinResult | None = None
        self._pending_segment: WheelSegment | None = None

        self.wallet.subscribe(self._on_balance_changed)

    # -- Read-only observers ---------------------------------------------

    @property
    def status(self) -> RoundStatus | None:
        """Round status, or None before the first round starts."""
        return self._status

    @property
    def phase(self) -> TurnPhase:
        return self._phase

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    @property
    def round_number(self) -> int:
        return self._round_number

    @property
    def is_active(self) -> bool:
        return self._status == RoundStatus.ACTIVE

    @property
    def displayed_phrase(self) -> str:
        if self._phrase_state is None:
            return ""
        return self._phrase_state.rendered_phrase()

    @property
    def category(self) -> str:
        if self._phrase_state is None:
            return ""
        return self._phrase_state.phrase.category

    @property
    def original_phrase(self) -> str | None:
        """The answer, once the round is over."""
        if self._phrase_state is None or self.is_active:
            return None
        return self._phrase_state.text

    @property
    def gem_balance(self) -> int:
        return self.wallet.balance

    @property
    def remaining_seconds(self) -> int:
        return self._timer.remaining

    @property
    def timer_display(self) -> str:
        return self._timer.formatted()

    @property
    def is_time_running_low(self) -> bool:
        return self.is_active and self._timer.is_running_low

    @property
    def free_hint_count(self) -> int:
        return self._free_hints

    @property
    def hints_used(self) -> int:
        return self._hints_used

    @property
    def revealed_hints(self) -> tuple[str, ...]:
        if self._phrase_state is None:
            return ()
        return self._phrase_state.phrase.hints[:self._hints_used]

    @property
    def guessed_letters(self) -> tuple[str, ...]:
        """Letters tried this round, in the order they were tried."""
        with self._lock:
            return tuple(self._guessed)

    @property
    def last_spin(self) -> SpinResult | None:
        return self._last_spin

    # -- Round lifecycle -------------------------------------------------

    def start_new_round(self, difficulty: Difficulty | str = Difficulty.EASY) -> Phrase:
        """Begin a fresh round and reset everything, gems included.

        Raises:
            ValueError: If the difficulty is unknown or has no phrases
        """
        difficulty = validate_difficulty(difficulty)
        with self._lock:
            phrase = self.library.get_random_phrase(difficulty)
            self._cancel_spin()

            self._round_number += 1
            self._difficulty = difficulty
            if self._phrase_state is None:
                self._phrase_state = PhraseState(phrase)
            else:
                self._phrase_state.initialize(phrase)
            self._guessed.clear()
            self._hints_used = 0
            self._free_hints = 0
            self._last_spin = None
            self._pending_segment = None
            self._phase = TurnPhase.AWAITING_SPIN
            self._timer.reset(self.rules.round_seconds(difficulty))
            self._status = RoundStatus.ACTIVE
            self.wallet.reset_gems(0)

            logger.info(
                "Round %d started (%s, %ds, category %r)",
                self._round_number, difficulty.value, self._timer.remaining, phrase.category,
            )
            self._publish(
                GameEvent.ROUND_STARTED,
                difficulty=difficulty.value,
                category=phrase.category,
                phrase=self.displayed_phrase,
                remaining_seconds=self._timer.remaining,
            )
            return phrase

    def abort_round(self) -> bool:
        """End the round at the player's request. False if nothing was active."""
        with self._lock:
            if not self.is_active:
                return False
            self._finish(RoundStatus.PLAYER_ABORTED)
            return True

    def tick(self) -> int:
        """Count down one second. A no-op unless the round is active.

        Returns:
            Seconds remaining
        """
        with self._lock:
            if not self.is_active:
                return self._timer.remaining

            self._timer.tick()
            self._publish(GameEvent.TIMER_UPDATED, remaining_seconds=self._timer.remaining)
            if self._timer.is_expired:
                self._time_out()
            return self._timer.remaining

    # -- Wheel -----------------------------------------------------------

    def request_spin(self) -> SpinOutcome:
        """Start the wheel. The result arrives via resolve_spin or stop_spin_early."""
        with self._lock:
            try:
                self._require_active()
                if self._phase == TurnPhase.SPINNING:
                    raise SpinInFlightError("The wheel is already spinning.")
                if self._phase == TurnPhase.AWAITING_LETTER:
                    raise InvalidStateError("Guess a letter for the current spin first.")

                end_angle = self.wheel.spin()
            except GameRuleError as exc:
                return SpinOutcome(status=self._status, error=exc.kind, message=str(exc))

            self._phase = TurnPhase.SPINNING
            self._publish(GameEvent.SPIN_STARTED, end_angle=end_angle)
            return SpinOutcome(end_angle=end_angle, status=self._status)

    def resolve_spin(self) -> SpinOutcome:
        """Land the spin in flight once its animation has finished."""
        with self._lock:
            try:
                self._require_spinning()
                result = self.wheel.resolve()
            except GameRuleError as exc:
                return SpinOutcome(status=self._status, error=exc.kind, message=str(exc))
            return self._land(result)

    def stop_spin_early(self, angle: float | None = None) -> SpinOutcome:
        """Interrupt the spin in flight and land wherever it has got to.

        Args:
            angle: Rotation the host animation had reached
        """
        with self._lock:
            try:
                self._require_spinning()
                result = self.wheel.stop_early(angle)
            except GameRuleError as exc:
                return SpinOutcome(status=self._status, error=exc.kind, message=str(exc))
            return self._land(result)

    def _land(self, result: SpinResult) -> SpinOutcome:
        self._last_spin = result
        self._pending_segment = result.segment
        self._phase = TurnPhase.AWAITING_LETTER
        logger.debug("Round %d: wheel landed on %s", self._round_number, result.segment)
        self._publish(
            GameEvent.WHEEL_LANDED,
            segment_index=result.segment_index,
            label=str(result.segment),
            angle=result.angle,
        )
        if not self.rules.reward_on_correct_guess:
            self._apply_reward(result.segment)
        return SpinOutcome(result=result, status=self._status)

    def _apply_reward(self, segment: WheelSegment) -> None:
        """Credit gems or a free hint. Time penalties wait for a miss."""
        if segment.kind == RewardKind.GEMS:
            self.wallet.add_gems(segment.amount)
        elif segment.kind == RewardKind.FREE_HINT:
            self._free_hints += 1
            self._publish(GameEvent.FREE_HINTS_CHANGED, free_hints=self._free_hints)

    # -- Letters ---------------------------------------------------------

    def submit_letter_guess(self, letter: str) -> GuessOutcome:
        """Guess a consonant for the segment the wheel landed on.

        A found letter may complete the phrase. A miss costs the landed
        segment's time penalty, if it carries one.
        """
        with self._lock:
            try:
                self._require_active()
                if self._phase != TurnPhase.AWAITING_LETTER:
                    raise InvalidStateError("Spin the wheel before guessing a letter.")
                letter = validate_consonant_guess(letter, self._guessed.keys())
            except GameRuleError as exc:
                return GuessOutcome(status=self._status, error=exc.kind, message=str(exc))

            segment = self._pending_segment
            self._pending_segment = None
            self._phase = TurnPhase.AWAITING_SPIN

            found = self._reveal(letter)
            docked = 0
            if found:
                if self.rules.reward_on_correct_guess and segment is not None:
                    self._apply_reward(segment)
                if self._phrase_state.is_complete():
                    self._finish(RoundStatus.WON)
            elif segment is not None and segment.is_penalty:
                docked = self._penalize(segment.amount)

            return GuessOutcome(
                letter=letter, found=found, seconds_docked=docked, status=self._status,
            )

    def buy_vowel(self, letter: str) -> GuessOutcome:
        """Pay gems to reveal a vowel. A miss costs nothing beyond the gems."""
        with self._lock:
            try:
                self._require_active()
                if not self.wallet.can_afford(self.rules.vowel_cost):
                    raise InsufficientFundsError(f"Need {self.rules.vowel_cost} gems!")
                letter = validate_vowel_guess(letter, self._guessed.keys())
                self.wallet.charge(self.rules.vowel_cost, "a vowel")
            except GameRuleError as exc:
                return GuessOutcome(status=self._status, error=exc.kind, message=str(exc))

            found = self._reveal(letter)
            if found and self._phrase_state.is_complete():
                self._finish(RoundStatus.WON)

            return GuessOutcome(letter=letter, found=found, status=self._status)

    def _reveal(self, letter: str) -> bool:
        self._guessed[letter] = None
        found = self._phrase_state.guess_letter(letter)
        logger.debug(
            "Round %d: guessed %s (%s)", self._round_number, letter, "hit" if found else "miss",
        )
        self._publish(
            GameEvent.LETTER_GUESSED,
            letter=letter,
            found=found,
            guessed_letters=tuple(self._guessed),
        )
        if found:
            self._publish(GameEvent.PHRASE_UPDATED, phrase=self.displayed_phrase)
        return found

    # -- Hints -----------------------------------------------------------

    def buy_hint(self, use_free_hint: bool = True) -> HintOutcome:
        """Reveal the next hint for the phrase.

        Args:
            use_free_hint: Spend a banked free hint when one is available.
                When False, or when the bank is empty, gems are charged.
        """
        with self._lock:
            try:
                self._require_active()
                hints = self._phrase_state.phrase.hints
                if self._hints_used >= self.rules.max_hints:
                    raise HintExhaustedError(
                        f"You have already used all {self.rules.max_hints} hints for this phrase."
                    )
                if self._hints_used >= len(hints):
                    raise HintExhaustedError("There are no more hints for this phrase.")

                used_free = use_free_hint and self._free_hints > 0
                if not used_free:
                    self.wallet.charge(self.rules.hint_cost, "a hint")
            except GameRuleError as exc:
                return HintOutcome(
                    hints_used=self._hints_used, error=exc.kind, message=str(exc),
                )

            if used_free:
                self._free_hints -= 1
                self._publish(GameEvent.FREE_HINTS_CHANGED, free_hints=self._free_hints)

            hint = hints[self._hints_used]
            self._hints_used += 1
            self._publish(
                GameEvent.HINT_REVEALED,
                hint=hint,
                hints_used=self._hints_used,
                used_free_hint=used_free,
            )
            return HintOutcome(hint=hint, used_free_hint=used_free, hints_used=self._hints_used)

    # -- Solving ---------------------------------------------------------

    def solve_phrase(self, candidate: str) -> SolveOutcome:
        """Try to solve the whole phrase.

        The comparison ignores case but nothing else. An empty attempt
        counts as cancelled and costs nothing.
        """
        with self._lock:
            try:
                self._require_active()
            except GameRuleError as exc:
                return SolveOutcome(status=self._status, error=exc.kind, message=str(exc))

            if not candidate:
                return SolveOutcome(status=self._status)

            if candidate.upper() == self._phrase_state.text.upper():
                self._phrase_state.reveal_all()
                self._publish(GameEvent.PHRASE_UPDATED, phrase=self.displayed_phrase)
                self._finish(RoundStatus.WON)
                return SolveOutcome(won=True, status=self._status)

            self._publish(GameEvent.SOLVE_FAILED, attempt=candidate)
            docked = self._penalize(self.rules.solve_penalty_seconds)
            return SolveOutcome(seconds_docked=docked, status=self._status)

    # -- Internals -------------------------------------------------------

    def _require_active(self) -> None:
        if self._status is None:
            raise InvalidStateError("No round has been started.")
        if self._status != RoundStatus.ACTIVE:
            raise InvalidStateError(f"The round is over ({self._status.name.lower()}).")

    def _require_spinning(self) -> None:
        self._require_active()
        if self._phase != TurnPhase.SPINNING:
            raise InvalidStateError("There is no spin to resolve.")

    def _penalize(self, seconds: int) -> int:
        """Dock time and end the round if it runs out. Returns seconds removed."""
        before = self._timer.remaining
        self._timer.penalize(seconds)
        docked = before - self._timer.remaining
        self._publish(GameEvent.TIMER_UPDATED, remaining_seconds=self._timer.remaining)
        if self._timer.is_expired:
            self._time_out()
        return docked

    def _time_out(self) -> None:
        self._phrase_state.reveal_all()
        self._publish(GameEvent.PHRASE_UPDATED, phrase=self.displayed_phrase)
        self._finish(RoundStatus.TIMED_OUT)

    def _finish(self, status: RoundStatus) -> None:
        self._cancel_spin()
        self._status = status
        self._pending_segment = None
        self._phase = TurnPhase.AWAITING_SPIN
        logger.info(
            "Round %d ended: %s with %ds left",
            self._round_number, status.name, self._timer.remaining,
        )
        event = terminal_event_for(status.name)
        if event is not None:
            self._publish(event, phrase=self._phrase_state.text, gems=self.wallet.balance)

    def _cancel_spin(self) -> None:
        """Drop a spin in flight without applying its reward."""
        if self.wheel.is_spinning:
            self.wheel.stop_early()
            logger.debug("Discarded unresolved spin")

    def _on_balance_changed(self, balance: int) -> None:
        self._publish(GameEvent.GEMS_CHANGED, balance=balance)

    def _publish(self, event: GameEvent, **data: Any) -> None:
        self.events.publish(event, round_number=self._round_number, **data)
