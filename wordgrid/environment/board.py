"""Rolling and representing the 5x5 letter board."""

import logging
import random
import re
from typing import List, Optional, Sequence, Tuple
from pydantic import BaseModel, ConfigDict, field_validator

from .dice import Die, GAME_DICE
from ..verifiers.adjacency import BOARD_SIZE, BOARD_WIDTH

logger = logging.getLogger(__name__)

QU_TILE = "Qu"


def _face_to_tile(face: str) -> str:
    """Show the Q face as the two-letter tile."""
    return QU_TILE if face == "Q" else face


class Board(BaseModel):
    """
    An immutable board of 25 tiles in row-major order.

    Attributes:
        tiles: Tile values; each is a single uppercase letter or "Qu"
    """

    model_config = ConfigDict(frozen=True)

    tiles: Tuple[str, ...]

    @field_validator("tiles", mode="before")
    @classmethod
    def _check_tiles(cls, value):
        tiles = tuple(value)
        if len(tiles) != BOARD_SIZE:
            raise ValueError(f"Board must have exactly {BOARD_SIZE} tiles, got {len(tiles)}")
        for i, tile in enumerate(tiles):
            if not isinstance(tile, str) or (tile != QU_TILE and not re.fullmatch(r"[A-Z]", tile)):
                raise ValueError(f"Invalid tile {tile!r} at position {i}")
        return tiles

    @classmethod
    def generate(
        cls,
        dice: Sequence[Die] = GAME_DICE,
        rng: Optional[random.Random] = None,
    ) -> "Board":
        """
        Roll a new board.

        Each die gets a random sort key; sorting by key (stable, so ties keep
        catalog order) gives the placement order. Each die then shows one
        random face.

        Args:
            dice: The dice to roll, one per cell
            rng: Random source; a fresh unseeded one is used if omitted

        Returns:
            A new Board
        """
        rng = rng or random.Random()

        keyed = [(rng.random(), die) for die in dice]
        keyed.sort(key=lambda pair: pair[0])

        tiles = [_face_to_tile(rng.choice(die.faces)) for _, die in keyed]
        board = cls(tiles=tiles)
        logger.debug("Rolled board %s", board.letters)
        return board

    @classmethod
    def from_letters(cls, letters: str) -> "Board":
        """
        Build a board from a string of letters, e.g. ``"CATSX..."``.

        Whitespace and commas are ignored. A "Q" becomes the "Qu" tile and
        swallows a directly following "U", so both "Q" and "QU" work.
        """
        cleaned = re.sub(r"[\s,]", "", letters).upper()
        if not cleaned.isalpha():
            raise ValueError(f"Board letters must be alphabetic: {letters!r}")

        tiles: List[str] = []
        i = 0
        while i < len(cleaned):
            ch = cleaned[i]
            if ch == "Q":
                tiles.append(QU_TILE)
                if cleaned[i + 1:i + 2] == "U":
                    i += 1
            else:
                tiles.append(ch)
            i += 1
        return cls(tiles=tiles)

    def __len__(self) -> int:
        return len(self.tiles)

    def __getitem__(self, index: int) -> str:
        return self.tiles[index]

    @property
    def letters(self) -> str:
        """The board as one string, "Qu" tiles written as "QU"; from_letters reads it back."""
        return "".join("QU" if tile == QU_TILE else tile for tile in self.tiles)

    def rows(self) -> List[List[str]]:
        return [list(self.tiles[r * BOARD_WIDTH:(r + 1) * BOARD_WIDTH]) for r in range(BOARD_WIDTH)]

    def contains(self, index: int) -> bool:
        return 0 <= index < len(self.tiles)


def generate_board(dice: Sequence[Die] = GAME_DICE, seed: Optional[int] = None) -> Board:
    """Roll a board, reproducibly when a seed is given."""
    return Board.generate(dice, random.Random(seed))
