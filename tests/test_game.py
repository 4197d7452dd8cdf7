"""
Spin & Solve - Session Factory Tests
"""

import json
import random

from spin_solve.config.settings import Settings
from spin_solve.engine.base import Difficulty, RoundStatus
from spin_solve.game import create_session, load_library
from spin_solve.phrases.library import PhraseLibrary


class TestLoadLibrary:
    def test_builtin_when_unset(self):
        library = load_library(Settings(_env_file=None))
        assert library.phrases(Difficulty.EASY) == PhraseLibrary.default().phrases(Difficulty.EASY)

    def test_phrase_file(self, tmp_path):
        path = tmp_path / "phrases.json"
        path.write_text(json.dumps({"easy": [{"text": "CAT"}], "hard": [{"text": "DOG"}]}))
        library = load_library(Settings(_env_file=None, phrase_file=path))
        assert library.get_random_phrase("hard").text == "DOG"


class TestCreateSession:
    def test_rules_follow_settings(self):
        settings = Settings(
            _env_file=None,
            easy_round_seconds=30,
            hard_round_seconds=45,
            vowel_cost=1,
            hint_cost=2,
            max_hints=1,
            solve_penalty_seconds=9,
            reward_on_correct_guess=True,
        )
        session = create_session(settings, rng=random.Random(3))

        assert session.rules.vowel_cost == 1
        assert session.rules.hint_cost == 2
        assert session.rules.max_hints == 1
        assert session.rules.solve_penalty_seconds == 9
        assert session.rules.reward_on_correct_guess is True

        session.start_new_round(Difficulty.HARD)
        assert session.remaining_seconds == 45
        assert session.status == RoundStatus.ACTIVE

    def test_wheel_follows_settings(self):
        settings = Settings(
            _env_file=None,
            wheel_segments=["5 gems", "-20 seconds", "Free Hint"],
            full_rotations=2,
        )
        session = create_session(settings, rng=random.Random(3))

        assert session.wheel.num_segments == 3
        assert session.wheel.segments[1].amount == 20

    def test_full_round_with_builtin_phrases(self):
        session = create_session(Settings(_env_file=None), rng=random.Random(8))
        phrase = session.start_new_round("easy")

        assert session.solve_phrase(phrase.text.lower()).won
        assert session.status == RoundStatus.WON

    def test_custom_library(self, cat_phrase):
        library = PhraseLibrary({Difficulty.EASY: [cat_phrase]})
        session = create_session(Settings(_env_file=None), library=library)
        assert session.start_new_round().text == "CAT"
