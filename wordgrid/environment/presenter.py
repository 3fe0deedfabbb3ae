"""
Presentation port for the game.

The Game controller only talks to the outside world through these callbacks.
The base Presenter ignores every call; ConsolePresenter draws to a text stream.
"""

import sys
from typing import Dict, List, Optional, Set, TextIO, Tuple

from ..utils.grid_visualizer import render_board, render_history


class Presenter:
    """Callbacks the game uses to show its state. All methods are no-ops."""

    def render_tile(self, index: int, letters: str) -> None:
        pass

    def set_tile_disabled(self, index: int, disabled: bool) -> None:
        pass

    def show_current_word(self, word: str) -> None:
        pass

    def append_history_row(self, word: str, score: int) -> None:
        pass

    def update_total(self, total: int) -> None:
        pass

    def show_error(self, message: str) -> None:
        pass

    def clear_error(self) -> None:
        pass


class ConsolePresenter(Presenter):
    """
    Text presenter for terminal play.

    Keeps its own copy of the tiles and the disabled set so the board can be
    redrawn on request.

    Attributes:
        out: Stream to write to (stdout by default)
        tiles: Tile letters by index, filled in by render_tile
        disabled: Indices currently shown as selected
        history: Rows appended so far
        total: Last total shown
        error: Message currently displayed, if any
    """

    def __init__(self, out: Optional[TextIO] = None, show_indices: bool = True):
        self.out = out or sys.stdout
        self.show_indices = show_indices
        self.tiles: Dict[int, str] = {}
        self.disabled: Set[int] = set()
        self.history: List[Tuple[str, int]] = []
        self.total = 0
        self.error: Optional[str] = None

    def _write(self, text: str) -> None:
        print(text, file=self.out)

    def render_tile(self, index: int, letters: str) -> None:
        self.tiles[index] = letters

    def set_tile_disabled(self, index: int, disabled: bool) -> None:
        if disabled:
            self.disabled.add(index)
        else:
            self.disabled.discard(index)

    def show_current_word(self, word: str) -> None:
        self._write(f"Current Word: {word}")

    def append_history_row(self, word: str, score: int) -> None:
        self.history.append((word, score))
        self._write(f"+ {word} ({score} point{'s' if score != 1 else ''})")

    def update_total(self, total: int) -> None:
        self.total = total
        self._write(f"Total: {total}")

    def show_error(self, message: str) -> None:
        self.error = message
        self._write(f"Error: {message}")

    def clear_error(self) -> None:
        self.error = None

    def draw_board(self) -> None:
        tiles = [self.tiles[i] for i in sorted(self.tiles)]
        self._write(render_board(tiles, self.disabled, show_indices=self.show_indices))

    def draw_history(self) -> None:
        self._write(render_history(self.history, self.total))
