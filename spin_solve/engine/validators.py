"""
Spin & Solve - Input Validation Utilities

Provides validation functions for game engine inputs. All validators
either return normalized data or raise a descriptive exception: a
LetterValidationError for player input the host should re-prompt for, a
plain ValueError for programming or configuration mistakes.
"""

from typing import AbstractSet

from spin_solve.engine.base import VOWELS, Difficulty, ErrorKind, LetterValidationError


def _normalize_single_letter(guess: str) -> str:
    """Check a guess is exactly one ASCII letter and uppercase it."""
    if not isinstance(guess, str) or len(guess) != 1:
        raise LetterValidationError("Please enter only one letter.", ErrorKind.WRONG_LENGTH)

    if not (guess.isascii() and guess.isalpha()):
        raise LetterValidationError("Enter a single letter (A-Z).", ErrorKind.NOT_A_LETTER)

    return guess.upper()


def validate_consonant_guess(guess: str, guessed: AbstractSet[str]) -> str:
    """
    Validate a letter submitted after a wheel spin.

    Args:
        guess: Raw text entered by the player
        guessed: Letters already attempted this round (uppercase)

    Returns:
        The uppercase letter

    Raises:
        LetterValidationError: Wrong length, non-letter, vowel or repeat
    """
    letter = _normalize_single_letter(guess)

    if letter in VOWELS:
        raise LetterValidationError("Vowels are not allowed!", ErrorKind.VOWEL_NOT_ALLOWED)

    if letter in guessed:
        raise LetterValidationError(
            "You already guessed that letter!", ErrorKind.ALREADY_GUESSED
        )

    return letter


def validate_vowel_guess(guess: str, guessed: AbstractSet[str]) -> str:
    """
    Validate a letter submitted through the paid vowel path.

    Args:
        guess: Raw text entered by the player
        guessed: Letters already attempted this round (uppercase)

    Returns:
        The uppercase vowel

    Raises:
        LetterValidationError: Wrong length, non-letter, consonant or repeat
    """
    letter = _normalize_single_letter(guess)

    if letter not in VOWELS:
        raise LetterValidationError("That's not a vowel.", ErrorKind.NOT_A_VOWEL)

    if letter in guessed:
        raise LetterValidationError(
            "This letter was already guessed.", ErrorKind.ALREADY_GUESSED
        )

    return letter


def validate_gem_amount(amount: int) -> int:
    """
    Validate a gem amount for a credit or debit.

    Raises:
        ValueError: If amount is not a non-negative integer
    """
    if not isinstance(amount, int) or isinstance(amount, bool):
        raise ValueError(f"Gem amount must be an integer, got {type(amount).__name__}.")

    if amount < 0:
        raise ValueError(f"Gem amount cannot be negative, got {amount}.")

    return amount


def validate_seconds(seconds: int) -> int:
    """
    Validate a duration in whole seconds.

    Raises:
        ValueError: If seconds is not a non-negative integer
    """
    if not isinstance(seconds, int) or isinstance(seconds, bool):
        raise ValueError(f"Seconds must be an integer, got {type(seconds).__name__}.")

    if seconds < 0:
        raise ValueError(f"Seconds cannot be negative, got {seconds}.")

    return seconds


def validate_difficulty(difficulty: Difficulty | str) -> Difficulty:
    """
    Coerce a difficulty name into the enum.

    Raises:
        ValueError: If the name is not a known tier
    """
    if isinstance(difficulty, Difficulty):
        return difficulty

    try:
        return Difficulty(str(difficulty).lower())
    except ValueError:
        valid = {d.value for d in Difficulty}
        raise ValueError(f"Difficulty must be one of {valid}, got {difficulty!r}.") from None
