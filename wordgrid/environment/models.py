"""
Pydantic models for the environment layer.

This module contains the data models (configuration, move outcomes, results)
used throughout the environment layer. The logic classes (Board, WordSession,
HistoryLedger, Game) remain in their respective files.
"""

from typing import List, Dict, Optional, Literal
from pydantic import BaseModel, Field, field_validator

from .dice import DICE_LITERALS, FACES_PER_DIE
from ..verifiers.adjacency import BOARD_SIZE
from ..verifiers.models import ValidationError


# Type aliases
Action = Literal["SELECT", "DESELECT", "SUBMIT"]


class HistoryEntry(BaseModel):
    """A submitted word and the points it scored."""
    word: str = Field(..., min_length=1)
    score: int = Field(..., ge=0)


class MoveResult(BaseModel):
    """Outcome of a single tile click or submit."""
    valid: bool
    action: Action
    index: Optional[int] = None
    word: str = ""  # Current word after the move
    score: Optional[int] = None  # Points awarded, submits only
    total: int = 0
    error: Optional[ValidationError] = None


class GameConfig(BaseModel):
    """Configuration for a game."""
    seed: Optional[int] = None
    dice: List[str] = Field(default_factory=lambda: list(DICE_LITERALS))
    board: Optional[str] = None  # Fixed board letters, skips rolling
    log_level: str = "WARNING"

    @field_validator("dice")
    @classmethod
    def _check_dice(cls, value: List[str]) -> List[str]:
        if len(value) != BOARD_SIZE:
            raise ValueError(f"Expected {BOARD_SIZE} dice, got {len(value)}")
        for literal in value:
            if len(literal) != FACES_PER_DIE or not literal.isalpha() or not literal.isascii():
                raise ValueError(f"Invalid die {literal!r}: need {FACES_PER_DIE} letters")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value}")
        return level


class GameResult(BaseModel):
    """Summary of a finished game."""
    config: GameConfig
    board: List[List[str]] = Field(default_factory=list)
    history: List[HistoryEntry] = Field(default_factory=list)
    total: int = 0
    words_submitted: int = 0
    rejected_moves: int = 0
    rejections_by_code: Dict[str, int] = Field(default_factory=dict)
    started_at: str = ""
    ended_at: str = ""
    duration_seconds: float = 0.0
