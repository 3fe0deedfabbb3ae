"""
User-input errors raised by the word session and the history ledger.

Every error is recoverable. The Game controller catches them at the
interaction boundary and turns them into a displayed message and a
failed MoveResult.
"""

from typing import Optional

from ..verifiers.models import ValidationError


class GameError(ValueError):
    """Base class for rejected player actions."""

    code = "GAME_ERROR"
    default_message = "That move is not allowed."

    def __init__(self, message: Optional[str] = None, index: Optional[int] = None):
        self.message = message or self.default_message
        self.index = index
        super().__init__(self.message)

    def to_validation_error(self) -> ValidationError:
        return ValidationError(code=self.code, message=self.message, index=self.index)


class EmptyWordError(GameError):
    code = "EMPTY_WORD"
    default_message = "You cannot submit empty words."


class DuplicateWordError(GameError):
    code = "DUPLICATE_WORD"
    default_message = "You have already submitted this word before."


class AdjacencyError(GameError):
    code = "NOT_ADJACENT"
    default_message = "The next button needs to be adjacent to the last button selected"


class OutOfOrderUndoError(GameError):
    code = "OUT_OF_ORDER_UNDO"
    default_message = "You can only undo your last move."


class TileInUseError(GameError):
    code = "TILE_IN_USE"
    default_message = "That tile is already part of the current word."


class TileNotSelectedError(GameError):
    code = "TILE_NOT_SELECTED"
    default_message = "That tile is not part of the current word."


class InvalidTileError(GameError):
    code = "INVALID_TILE"
    default_message = "There is no tile at that position."
