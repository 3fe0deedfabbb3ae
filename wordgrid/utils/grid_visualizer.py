from typing import Iterable, List, Sequence

from ..verifiers.adjacency import BOARD_WIDTH

CELL_WIDTH = 4


def render_cell(tile: str, selected: bool = False) -> str:
    """Pad a tile to a fixed width, bracketing it when selected."""
    text = f"[{tile}]" if selected else f" {tile} "
    return text.ljust(CELL_WIDTH)


def render_board(tiles: Sequence[str], used: Iterable[int] = (), show_indices: bool = False) -> str:
    """
    Render tiles as a 5x5 grid.

    Selected tiles are shown in brackets. With ``show_indices`` a second block
    with the cell numbers is printed beside the letters.
    """
    used = set(used)
    lines: List[str] = []
    for row in range(len(tiles) // BOARD_WIDTH):
        start = row * BOARD_WIDTH
        cells = ''.join(
            render_cell(tiles[i], i in used)
            for i in range(start, start + BOARD_WIDTH)
        )
        if show_indices:
            numbers = ' '.join(f"{i:2d}" for i in range(start, start + BOARD_WIDTH))
            cells = f"{cells}   {numbers}"
        lines.append(cells.rstrip())
    return '\n'.join(lines)


def render_history(rows: Sequence[tuple], total: int) -> str:
    """Render the submitted words as a two-column table with a totals row."""
    width = max([len("Totals")] + [len(word) for word, _ in rows])
    lines = [f"{word.ljust(width)}  {score}" for word, score in rows]
    lines.append(f"{'Totals'.ljust(width)}  {total}")
    return '\n'.join(lines)
