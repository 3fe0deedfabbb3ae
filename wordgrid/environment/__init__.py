"""Game environment for wordgrid."""

from .models import (
    Action,
    HistoryEntry,
    MoveResult,
    GameConfig,
    GameResult,
)
from .errors import (
    GameError,
    EmptyWordError,
    DuplicateWordError,
    AdjacencyError,
    OutOfOrderUndoError,
    TileInUseError,
    TileNotSelectedError,
    InvalidTileError,
)
from .dice import Die, DICE_LITERALS, GAME_DICE, make_dice
from .board import Board, QU_TILE, generate_board
from .session import WordSession
from .ledger import HistoryLedger
from .presenter import Presenter, ConsolePresenter
from .commands import ParsedCommand, parse_command, HELP_TEXT
from .game import Game

__all__ = [
    "Action",
    "HistoryEntry",
    "MoveResult",
    "GameConfig",
    "GameResult",
    "GameError",
    "EmptyWordError",
    "DuplicateWordError",
    "AdjacencyError",
    "OutOfOrderUndoError",
    "TileInUseError",
    "TileNotSelectedError",
    "InvalidTileError",
    "Die",
    "DICE_LITERALS",
    "GAME_DICE",
    "make_dice",
    "Board",
    "QU_TILE",
    "generate_board",
    "WordSession",
    "HistoryLedger",
    "Presenter",
    "ConsolePresenter",
    "ParsedCommand",
    "parse_command",
    "HELP_TEXT",
    "Game",
]
