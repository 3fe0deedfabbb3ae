"""Parsing of terminal commands."""

import re
from typing import Literal, Optional
from pydantic import BaseModel

from ..verifiers.adjacency import BOARD_WIDTH


CommandAction = Literal["CLICK", "SUBMIT", "BOARD", "HISTORY", "HELP", "QUIT", "UNKNOWN"]

KEYWORDS = {
    "s": "SUBMIT",
    "submit": "SUBMIT",
    "b": "BOARD",
    "board": "BOARD",
    "h": "HISTORY",
    "history": "HISTORY",
    "?": "HELP",
    "help": "HELP",
    "q": "QUIT",
    "quit": "QUIT",
    "exit": "QUIT",
}

HELP_TEXT = """\
Commands:
  <n>          click tile n (0-24, row by row)
  <row>,<col>  click the tile at row, col (both 0-4)
  submit, s    submit the current word
  board, b     show the board
  history, h   show submitted words and the total
  help, ?      show this help
  quit, q      end the game"""


class ParsedCommand(BaseModel):
    """A single line of player input."""
    action: CommandAction
    index: Optional[int] = None
    raw: str = ""
    error: Optional[str] = None


def parse_command(line: str) -> ParsedCommand:
    """
    Parse one line of input.

    Tiles can be given as a board index (``12``) or as ``row,col``
    (``2,2`` or ``2 2``). Anything unrecognised comes back as UNKNOWN with
    an error message.
    """
    text = line.strip()
    lowered = text.lower()

    if lowered in KEYWORDS:
        return ParsedCommand(action=KEYWORDS[lowered], raw=line)

    index_match = re.fullmatch(r'\d+', text)
    if index_match:
        return ParsedCommand(action="CLICK", index=int(text), raw=line)

    coord_match = re.fullmatch(r'(\d+)\s*[,\s]\s*(\d+)', text)
    if coord_match:
        row, col = int(coord_match.group(1)), int(coord_match.group(2))
        if row >= BOARD_WIDTH or col >= BOARD_WIDTH:
            return ParsedCommand(
                action="UNKNOWN",
                raw=line,
                error=f"Row and column must be between 0 and {BOARD_WIDTH - 1}",
            )
        return ParsedCommand(action="CLICK", index=row * BOARD_WIDTH + col, raw=line)

    return ParsedCommand(
        action="UNKNOWN",
        raw=line,
        error=f"Unknown command: '{text}' (type 'help' for a list)",
    )
