"""
Spin & Solve - Phrase Reveal State

Tracks which characters of the secret phrase are visible. Spaces are
always visible; letters become visible through guesses or a full reveal.
"""

from spin_solve.engine.base import Phrase


class PhraseState:
    """
    Reveal mask over a single phrase.

    Matching is case-insensitive but revealed characters keep the
    phrase's original case.
    """

    PLACEHOLDER = "_"
    SLOT_PADDING = "  "
    WORD_GAP = "   "

    def __init__(self, phrase: Phrase) -> None:
        self.initialize(phrase)

    def initialize(self, phrase: Phrase) -> None:
        """Hide every letter of a new phrase."""
        self._phrase = phrase
        self._revealed = [ch == " " for ch in phrase.text]

    @property
    def phrase(self) -> Phrase:
        return self._phrase

    @property
    def text(self) -> str:
        return self._phrase.text

    @property
    def revealed_mask(self) -> tuple[bool, ...]:
        return tuple(self._revealed)

    @property
    def hidden_count(self) -> int:
        """Number of positions still hidden."""
        return self._revealed.count(False)

    def guess_letter(self, letter: str) -> bool:
        """Reveal every occurrence of a letter.

        Args:
            letter: Single character, any case

        Returns:
            True if the letter appears at least once in the phrase
        """
        letter = letter.upper()
        found = False

        for i, ch in enumerate(self._phrase.text):
            if ch.upper() == letter:
                self._revealed[i] = True
                found = True

        return found

    def is_complete(self) -> bool:
        """True once every non-space position is revealed."""
        return all(self._revealed)

    def reveal_all(self) -> None:
        self._revealed = [True] * len(self._phrase.text)

    def rendered_phrase(self) -> str:
        """Render the phrase as fixed-width slots.

        Every slot is three columns wide: a letter or placeholder followed
        by two spaces, or three spaces for a word gap. The width never
        changes as letters are revealed.
        """
        parts = []
        for ch, shown in zip(self._phrase.text, self._revealed):
            if ch == " ":
                parts.append(self.WORD_GAP)
            elif shown:
                parts.append(ch + self.SLOT_PADDING)
            else:
                parts.append(self.PLACEHOLDER + self.SLOT_PADDING)
        return "".join(parts)

    def __str__(self) -> str:
        return self.rendered_phrase()
