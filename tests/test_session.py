"""Test the word session state machine."""

import pytest

from wordgrid.environment import (
    WordSession,
    AdjacencyError,
    OutOfOrderUndoError,
    TileInUseError,
    TileNotSelectedError,
    InvalidTileError,
)


@pytest.fixture
def session(board):
    return WordSession(board=board)


class TestSelectTile:
    """Test cases for adding tiles to the path."""

    def test_starts_empty(self, session):
        """A new session has no path and no word."""
        assert session.is_empty
        assert session.tail is None
        assert session.word == ""

    def test_first_tile_can_be_anywhere(self, session):
        """With nothing selected, any tile is accepted."""
        assert session.select_tile(24) == "Y"
        assert session.path == [24]

    def test_spell_cat(self, session):
        """Tiles 0, 1, 7 spell CAT."""
        session.select_tile(0)
        session.select_tile(1)
        word = session.select_tile(7)
        assert word == "CAT"
        assert session.path == [0, 1, 7]
        assert session.used == {0, 1, 7}
        assert session.tail == 7

    def test_non_adjacent_rejected(self, session):
        """A tile that does not touch the tail is refused and nothing changes."""
        session.select_tile(0)
        session.select_tile(1)
        with pytest.raises(AdjacencyError) as exc_info:
            session.select_tile(12)
        assert exc_info.value.message == "The next button needs to be adjacent to the last button selected"
        assert session.path == [0, 1]
        assert session.word == "CA"
        assert not session.is_used(12)

    def test_adjacency_checked_against_tail_only(self, session):
        """A tile next to an earlier tile but not the tail is refused."""
        session.select_tile(0)
        session.select_tile(1)
        session.select_tile(7)
        with pytest.raises(AdjacencyError):
            session.select_tile(5)  # touches 0 and 1, not 7

    def test_used_tile_rejected(self, session):
        """A tile already in the path cannot be added again."""
        session.select_tile(0)
        with pytest.raises(TileInUseError):
            session.select_tile(0)
        assert session.path == [0]

    @pytest.mark.parametrize("index", [-1, 25, 100])
    def test_off_board_rejected(self, session, index):
        """Indices outside 0-24 are refused."""
        with pytest.raises(InvalidTileError):
            session.select_tile(index)
        assert session.is_empty

    def test_qu_tile_adds_two_letters(self, session):
        """The Qu tile appends two characters."""
        session.select_tile(12)
        assert session.select_tile(17) == "LQu"


class TestDeselectTile:
    """Test cases for undoing the last tile."""

    def test_undo_tail(self, session):
        """Undoing the tail shortens the path and the word."""
        for i in (0, 1, 7):
            session.select_tile(i)
        assert session.deselect_tile(7) == "CA"
        assert session.path == [0, 1]
        assert not session.is_used(7)

    def test_undo_non_tail_rejected(self, session):
        """Only the last tile can be undone."""
        for i in (0, 1, 7):
            session.select_tile(i)
        with pytest.raises(OutOfOrderUndoError) as exc_info:
            session.deselect_tile(1)
        assert exc_info.value.message == "You can only undo your last move."
        assert session.path == [0, 1, 7]
        assert session.word == "CAT"

    def test_undo_unselected_rejected(self, session):
        """A tile that is not in the path cannot be undone."""
        session.select_tile(0)
        with pytest.raises(TileNotSelectedError):
            session.deselect_tile(6)
        assert session.path == [0]

    def test_undo_qu_removes_two_letters(self, session):
        """Undoing a Qu tail removes both characters."""
        session.select_tile(12)
        session.select_tile(17)
        assert session.deselect_tile(17) == "L"

    def test_undo_to_empty(self, session):
        """Undoing every tile returns to the empty state."""
        session.select_tile(0)
        session.select_tile(1)
        session.deselect_tile(1)
        session.deselect_tile(0)
        assert session.is_empty
        assert session.word == ""
        assert session.used == set()

    def test_reselect_after_undo(self, session):
        """An undone tile can be picked again."""
        session.select_tile(0)
        session.deselect_tile(0)
        assert session.select_tile(0) == "C"

    def test_word_matches_path(self, session):
        """The word is always the tiles of the path in order."""
        moves = [("s", 12), ("s", 17), ("s", 18), ("d", 18), ("s", 16), ("s", 11)]
        for kind, index in moves:
            if kind == "s":
                session.select_tile(index)
            else:
                session.deselect_tile(index)
            assert session.word == "".join(session.board[i] for i in session.path)


class TestReset:
    """Test cases for clearing the session."""

    def test_reset_returns_released_tiles(self, session):
        """reset() frees every tile and reports which ones were used."""
        for i in (0, 1, 7):
            session.select_tile(i)
        assert session.reset() == [0, 1, 7]
        assert session.is_empty
        assert session.used == set()
        assert session.word == ""

    def test_get_state(self, session):
        """State lists the path, word and tiles."""
        session.select_tile(12)
        session.select_tile(17)
        assert session.get_state() == {
            "path": [12, 17],
            "word": "LQu",
            "tiles": ["L", "Qu"],
            "available": [11, 13, 16, 18, 21, 22, 23],
        }

    def test_available_tiles(self, session):
        """Any tile is available first, then only free neighbours of the tail."""
        assert session.available_tiles() == list(range(25))
        session.select_tile(0)
        assert session.available_tiles() == [1, 5, 6]
        session.select_tile(6)
        assert session.available_tiles() == [1, 2, 5, 7, 10, 11, 12]
