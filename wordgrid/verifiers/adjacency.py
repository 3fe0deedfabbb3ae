"""Adjacency rules for the 5x5 letter grid."""

from typing import List, Optional, Tuple

BOARD_WIDTH = 5
BOARD_SIZE = BOARD_WIDTH * BOARD_WIDTH


def position(index: int) -> Tuple[int, int]:
    """Return the (row, col) of a row-major board index."""
    return index // BOARD_WIDTH, index % BOARD_WIDTH


def is_adjacent(a: int, b: Optional[int]) -> bool:
    """
    Check whether two cells touch horizontally, vertically or diagonally.

    Two boundary rules are part of the contract:
    - a cell is adjacent to itself
    - anything is adjacent to an empty prior selection (``b is None``)
    """
    if b is None:
        return True

    row_a, col_a = position(a)
    row_b, col_b = position(b)
    return abs(row_a - row_b) <= 1 and abs(col_a - col_b) <= 1


def init_neighbors(width: int = BOARD_WIDTH) -> List[List[int]]:
    """Build the sorted neighbour list of every cell, excluding the cell itself."""
    neighbors: List[List[int]] = []
    for i in range(width * width):
        row, col = divmod(i, width)
        cells = []
        for dr in (-1, 0, 1):
            nr = row + dr
            if nr < 0 or nr >= width:
                continue
            for dc in (-1, 0, 1):
                nc = col + dc
                if nc < 0 or nc >= width:
                    continue
                if dr == 0 and dc == 0:
                    continue
                cells.append(nr * width + nc)
        cells.sort()
        neighbors.append(cells)
    return neighbors


NEIGHBORS = init_neighbors()


def neighbors(index: int) -> List[int]:
    """Indices of the cells touching ``index``."""
    return list(NEIGHBORS[index])
