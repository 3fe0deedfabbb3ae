"""
The letter dice used to roll a board.

The catalog is the 25-die "Big Boggle" style set. Faces are stored upper-case;
the single "Q" face is shown as the tile "Qu" when the board is rolled.
"""

from typing import List, Sequence, Tuple
from pydantic import BaseModel, ConfigDict, field_validator


DICE_LITERALS: List[str] = [
    "aaafrs", "aaeeee", "aafirs", "adennn", "aeeeem",
    "aeegmu", "aegmnn", "afirsy", "bjkqxz", "ccenst",
    "ceiilt", "ceilpt", "ceipst", "ddhnot", "dhhlor",
    "dhlnor", "dhlnor", "eiiitt", "emottt", "ensssu",
    "fiprsy", "gorrvw", "iprrry", "nootuw", "ooottu",
]

FACES_PER_DIE = 6


class Die(BaseModel):
    """A single six-sided letter die."""

    model_config = ConfigDict(frozen=True)

    faces: Tuple[str, ...]

    @field_validator("faces", mode="before")
    @classmethod
    def _normalize_faces(cls, value):
        if isinstance(value, str):
            value = tuple(value)
        faces = tuple(face.upper() for face in value)
        if len(faces) != FACES_PER_DIE:
            raise ValueError(f"A die needs {FACES_PER_DIE} faces, got {len(faces)}")
        for face in faces:
            if len(face) != 1 or not ("A" <= face <= "Z"):
                raise ValueError(f"Invalid die face: {face!r}")
        return faces

    @classmethod
    def from_literal(cls, literal: str) -> "Die":
        """Build a die from a six-letter string such as ``"bjkqxz"``."""
        return cls(faces=literal)

    @property
    def literal(self) -> str:
        return "".join(self.faces)


def make_dice(literals: Sequence[str]) -> Tuple[Die, ...]:
    """Turn a list of six-letter strings into a tuple of dice."""
    return tuple(Die.from_literal(literal) for literal in literals)


GAME_DICE: Tuple[Die, ...] = make_dice(DICE_LITERALS)
