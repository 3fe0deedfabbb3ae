"""Word scoring."""

from typing import List

# Points by word length; anything longer than the table scores the last entry.
SCORES: List[int] = [0, 0, 0, 1, 1, 2, 3, 5, 11]


def score_word(word: str) -> int:
    """
    Score a finished word by its character length.

    A "Qu" tile counts as two characters, so "QUIT" built from three tiles
    is a four-letter word.
    """
    length = len(word)
    if length >= len(SCORES):
        return SCORES[-1]
    return SCORES[length]
