"""
Spin & Solve - Phrase Library

Read-only source of phrases grouped by difficulty tier. Ships with a
built-in set and can load a JSON phrase file instead.
"""

import json
import logging
import random
from pathlib import Path
from typing import Mapping, Sequence

from spin_solve.engine.base import Difficulty, Phrase
from spin_solve.engine.validators import validate_difficulty
from spin_solve.phrases.models import PhraseBook

logger = logging.getLogger(__name__)


_BUILTIN_PHRASES: dict[Difficulty, tuple[Phrase, ...]] = {
    Difficulty.EASY: (
        Phrase("Piece of Cake", "Saying", (
            "Something that is very easy to do",
            "Often said about a simple task",
            "A dessert is part of it",
        )),
        Phrase("Hot Dog", "Food", (
            "Popular at ballgames",
            "Served in a bun",
            "Not actually a pet",
        )),
        Phrase("Sunflower", "Nature", (
            "It turns to face the sun",
            "Its seeds make a salty snack",
            "A tall yellow bloom",
        )),
        Phrase("Happy Birthday", "Event", (
            "A song sung once a year",
            "There is usually cake",
            "Candles are blown out",
        )),
        Phrase("Ice Cream", "Food", (
            "A frozen treat",
            "Comes in a cone or a cup",
            "Vanilla is a classic flavor",
        )),
        Phrase("Rainbow", "Nature", (
            "Appears after the rain",
            "It has seven colors",
            "Legend puts gold at its end",
        )),
        Phrase("Good Morning", "Greeting", (
            "Said at the start of the day",
            "Often paired with coffee",
            "The opposite of good night",
        )),
        Phrase("Teddy Bear", "Toy", (
            "A cuddly stuffed animal",
            "Named after a president",
            "Children take it to bed",
        )),
    ),
    Difficulty.HARD: (
        Phrase("Once in a Blue Moon", "Saying", (
            "Something that happens very rarely",
            "It has to do with the night sky",
            "A color is in the phrase",
        )),
        Phrase("Break the Ice", "Saying", (
            "Get a conversation started",
            "Useful at parties with strangers",
            "Something frozen gets broken",
        )),
        Phrase("Hit the Nail on the Head", "Saying", (
            "Being exactly right",
            "A carpentry expression",
            "You need a hammer for it",
        )),
        Phrase("Photosynthesis", "Science", (
            "How plants make food",
            "It needs sunlight",
            "Produces oxygen",
        )),
        Phrase("The Great Wall of China", "Landmark", (
            "A very long structure",
            "Built over many dynasties",
            "Located in Asia",
        )),
        Phrase("Spill the Beans", "Saying", (
            "Reveal a secret",
            "Something gets knocked over",
            "A legume is involved",
        )),
        Phrase("Northern Lights", "Nature", (
            "Colorful lights in the sky",
            "Also called the aurora borealis",
            "Best seen near the Arctic",
        )),
        Phrase("Under the Weather", "Saying", (
            "Feeling a bit sick",
            "Nothing to do with rain",
            "You might stay home in bed",
        )),
    ),
}


class PhraseLibrary:
    """Phrases grouped by difficulty tier, drawn uniformly at random."""

    def __init__(
        self,
        pools: Mapping[Difficulty, Sequence[Phrase]],
        rng: random.Random | None = None,
    ) -> None:
        self._pools: dict[Difficulty, tuple[Phrase, ...]] = {
            tier: tuple(phrases) for tier, phrases in pools.items()
        }
        self._rng = rng or random.Random()

    @classmethod
    def default(cls, rng: random.Random | None = None) -> "PhraseLibrary":
        """Library with the built-in phrase set."""
        return cls(_BUILTIN_PHRASES, rng=rng)

    @classmethod
    def from_json(cls, path: str | Path, rng: random.Random | None = None) -> "PhraseLibrary":
        """Load a phrase file of the form {"easy": [...], "hard": [...]}.

        Raises:
            OSError: If the file cannot be read
            pydantic.ValidationError: If the content is malformed
        """
        path = Path(path)
        raw = json.loads(path.read_text(encoding="utf-8"))
        book = PhraseBook.model_validate(raw)
        pools = {
            Difficulty.EASY: [record.to_phrase() for record in book.easy],
            Difficulty.HARD: [record.to_phrase() for record in book.hard],
        }
        logger.info(
            "Loaded %d easy and %d hard phrases from %s",
            len(pools[Difficulty.EASY]), len(pools[Difficulty.HARD]), path,
        )
        return cls(pools, rng=rng)

    def phrases(self, tier: Difficulty | str) -> tuple[Phrase, ...]:
        return self._pools.get(validate_difficulty(tier), ())

    def get_random_phrase(self, tier: Difficulty | str) -> Phrase:
        """Pick a phrase uniformly from a tier.

        Raises:
            ValueError: If the tier is unknown or has no phrases
        """
        tier = validate_difficulty(tier)
        pool = self._pools.get(tier)
        if not pool:
            raise ValueError(f"No phrases available for difficulty {tier.value!r}.")
        return self._rng.choice(pool)
