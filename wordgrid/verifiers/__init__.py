"""Move verification for wordgrid."""

from .adjacency import BOARD_WIDTH, BOARD_SIZE, NEIGHBORS, is_adjacent, neighbors, position
from .scoring import SCORES, score_word
from .models import ValidationError

__all__ = [
    # Adjacency
    "BOARD_WIDTH",
    "BOARD_SIZE",
    "NEIGHBORS",
    "is_adjacent",
    "neighbors",
    "position",
    # Scoring
    "SCORES",
    "score_word",
    # Models
    "ValidationError",
]
