"""
Spin & Solve - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

import random
from types import SimpleNamespace

import pytest

from spin_solve.engine.base import Difficulty, Phrase
from spin_solve.engine.session import GameSession, RoundRules
from spin_solve.engine.wheel import Wheel
from spin_solve.events.dispatcher import EventDispatcher


# =============================================================================
# WHEEL TEST DATA
# =============================================================================

# Resting angle -> (segment index, label) for the default eight-segment wheel.
# The pointer sits half a segment past segment 0 and indices run
# counter-clockwise, so angle 0 lands on the last segment.
DEFAULT_WHEEL_LANDINGS: dict[float, tuple[int, str]] = {
    0.0: (7, "4 gems"),
    45.0: (6, "2 gems"),
    90.0: (5, "-10 seconds"),
    135.0: (4, "1 gem"),
    180.0: (3, "Free Hint"),
    225.0: (2, "3 gems"),
    270.0: (1, "-5 seconds"),
    315.0: (0, "2 gems"),
}

ANGLES = SimpleNamespace(
    four_gems=0.0,
    two_gems=45.0,
    minus_ten=90.0,
    one_gem=135.0,
    free_hint=180.0,
    three_gems=225.0,
    minus_five=270.0,
)


@pytest.fixture
def angles() -> SimpleNamespace:
    """Named landing angles on the default wheel."""
    return ANGLES


@pytest.fixture
def wheel_landings() -> dict[float, tuple[int, str]]:
    return dict(DEFAULT_WHEEL_LANDINGS)


# =============================================================================
# PHRASE FIXTURES
# =============================================================================

class StubLibrary:
    """Phrase source that always hands out the same phrase."""

    def __init__(self, phrase: Phrase) -> None:
        self.phrase = phrase
        self.requests: list[Difficulty | str] = []

    def get_random_phrase(self, tier: Difficulty | str) -> Phrase:
        self.requests.append(tier)
        return self.phrase


@pytest.fixture
def cat_phrase() -> Phrase:
    return Phrase("CAT", "Animal", ("It meows", "Has nine lives", "Chases mice"))


@pytest.fixture
def two_word_phrase() -> Phrase:
    return Phrase("Hot Dog", "Food", ("Served in a bun", "Popular at ballgames", "Not a pet"))


# =============================================================================
# SESSION FIXTURES
# =============================================================================

@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def make_session(rng):
    """Factory building a session around a fixed phrase."""

    def _make(
        phrase: Phrase,
        *,
        difficulty: Difficulty = Difficulty.EASY,
        rules: RoundRules | None = None,
        wheel: Wheel | None = None,
        events: EventDispatcher | None = None,
        start: bool = True,
    ) -> GameSession:
        session = GameSession(
            StubLibrary(phrase),
            rules=rules,
            wheel=wheel or Wheel(rng=rng),
            events=events,
        )
        if start:
            session.start_new_round(difficulty)
        return session

    return _make


@pytest.fixture
def cat_session(make_session, cat_phrase) -> GameSession:
    """Active easy round on the phrase CAT."""
    return make_session(cat_phrase)


@pytest.fixture
def land_on():
    """Spin and stop the wheel at a chosen angle."""

    def _land(session: GameSession, angle: float):
        spin = session.request_spin()
        assert spin.ok, spin.message
        outcome = session.stop_spin_early(angle)
        assert outcome.ok, outcome.message
        return outcome

    return _land
