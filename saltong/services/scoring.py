"""
Letter Scoring

Implements the Wordle letter evaluation algorithm used by every puzzle mode.
"""

from collections import Counter
from typing import List

from ..models.errors import IncompleteGuessError
from ..models.game import Attempt, LetterStatus


def normalize(word: str) -> str:
    """
    Upper-cases a word one letter at a time.

    Letters whose upper case form is longer than one character (such as
    ``ß``) are kept as they are, so the word length never changes.
    """
    return ''.join(letter.upper() if len(letter.upper()) == 1 else letter for letter in word)


def score(guess: str, answer: str) -> List[LetterStatus]:
    """
    Scores a guess against the answer, letter by letter.

    Comparison is case-insensitive. Exact matches are resolved first, so when
    the guess repeats a letter more often than the answer contains it, the
    positionally correct occurrence keeps its mark and the remaining
    occurrences consume what is left of the answer's letters from left to right.

    Args:
        guess: The submitted word
        answer: The hidden word

    Returns:
        List[LetterStatus]: One status per letter of the guess

    Raises:
        IncompleteGuessError: If the guess length differs from the answer length
    """
    if len(guess) != len(answer):
        raise IncompleteGuessError(len(answer))

    guess = normalize(guess)
    answer = normalize(answer)

    result: List[LetterStatus] = [LetterStatus.wrong] * len(answer)
    remaining = Counter(answer)

    # First pass: exact position matches
    for i, (guess_letter, answer_letter) in enumerate(zip(guess, answer)):
        if guess_letter == answer_letter:
            result[i] = LetterStatus.correct
            remaining[guess_letter] -= 1

    # Second pass: letters present elsewhere, limited by what is left in the pool
    for i, guess_letter in enumerate(guess):
        if result[i] == LetterStatus.correct:
            continue
        if remaining[guess_letter] > 0:
            result[i] = LetterStatus.wrongSpot
            remaining[guess_letter] -= 1

    return result


def score_attempt(guess: str, answer: str) -> Attempt:
    """Scores a guess and pairs each normalized letter with its status."""
    statuses = score(guess, answer)
    return Attempt(word=tuple(zip(normalize(guess), statuses)))
