"""
WordSession class for managing the word currently being built.

Tracks the selection path as a stack of board indices, which tiles are in
use, and the letters spelled so far.
"""

import logging
from typing import List, Optional, Set
from pydantic import BaseModel, Field

from .board import Board
from .errors import (
    AdjacencyError,
    InvalidTileError,
    OutOfOrderUndoError,
    TileInUseError,
    TileNotSelectedError,
)
from ..verifiers.adjacency import NEIGHBORS, is_adjacent

logger = logging.getLogger(__name__)


class WordSession(BaseModel):
    """
    The in-progress word on one board.

    Only the most recently selected tile can be undone, and each new tile
    must touch the previous one, so the path behaves as a stack.

    Attributes:
        board: The board being played
        path: Selected tile indices, oldest first
        used: Indices currently in the path
        word: Letters of the selected tiles, in path order
    """

    board: Board
    path: List[int] = Field(default_factory=list)
    used: Set[int] = Field(default_factory=set)
    word: str = ""

    @property
    def tail(self) -> Optional[int]:
        """Index of the last selected tile, or None when nothing is selected."""
        return self.path[-1] if self.path else None

    @property
    def is_empty(self) -> bool:
        return not self.path

    def is_used(self, index: int) -> bool:
        return index in self.used

    def available_tiles(self) -> List[int]:
        """Tiles that can be selected next."""
        if self.tail is None:
            candidates = range(len(self.board))
        else:
            candidates = NEIGHBORS[self.tail]
        return [i for i in candidates if i not in self.used]

    def _check_index(self, index: int) -> None:
        if not self.board.contains(index):
            raise InvalidTileError(
                f"There is no tile at position {index}; choose 0-{len(self.board) - 1}.",
                index=None,
            )

    def select_tile(self, index: int) -> str:
        """
        Add a tile to the end of the path.

        Args:
            index: Board index of the tile

        Returns:
            The current word after the tile is added

        Raises:
            InvalidTileError: If the index is off the board
            TileInUseError: If the tile is already in the path
            AdjacencyError: If the tile does not touch the last selected tile
        """
        self._check_index(index)
        if index in self.used:
            raise TileInUseError(index=index)
        if not is_adjacent(index, self.tail):
            raise AdjacencyError(index=index)

        self.used.add(index)
        self.path.append(index)
        self.word += self.board[index]
        logger.debug("Selected tile %d (%s), word is now %r", index, self.board[index], self.word)
        return self.word

    def deselect_tile(self, index: int) -> str:
        """
        Undo the last selected tile.

        Args:
            index: Board index of the tile; must be the tail of the path

        Returns:
            The current word after the tile is removed

        Raises:
            InvalidTileError: If the index is off the board
            TileNotSelectedError: If the tile is not in the path
            OutOfOrderUndoError: If the tile is in the path but is not the last one
        """
        self._check_index(index)
        if index not in self.used:
            raise TileNotSelectedError(index=index)
        if index != self.tail:
            raise OutOfOrderUndoError(index=index)

        self.path.pop()
        self.used.discard(index)
        # "Qu" tiles are two characters long
        self.word = self.word[:len(self.word) - len(self.board[index])]
        logger.debug("Deselected tile %d, word is now %r", index, self.word)
        return self.word

    def reset(self) -> List[int]:
        """
        Clear the path and free every tile.

        Returns:
            The indices that were in use, in path order
        """
        released = list(self.path)
        self.path = []
        self.used = set()
        self.word = ""
        return released

    def get_state(self) -> dict:
        return {
            "path": list(self.path),
            "word": self.word,
            "tiles": [self.board[i] for i in self.path],
            "available": self.available_tiles(),
        }
