import pytest

from wordgrid.environment import Board, Presenter

# C A B D E
# F G T H I
# J K L M N
# O P Qu R S
# U V W X Y
TEST_LETTERS = "CABDE FGTHI JKLMN OPQRS UVWXY"


class RecordingPresenter(Presenter):
    """Presenter that records every call for assertions."""

    def __init__(self):
        self.calls = []
        self.tiles = {}
        self.disabled = set()
        self.word = None
        self.rows = []
        self.total = None
        self.error = None

    def render_tile(self, index, letters):
        self.calls.append(("render_tile", index, letters))
        self.tiles[index] = letters

    def set_tile_disabled(self, index, disabled):
        self.calls.append(("set_tile_disabled", index, disabled))
        if disabled:
            self.disabled.add(index)
        else:
            self.disabled.discard(index)

    def show_current_word(self, word):
        self.calls.append(("show_current_word", word))
        self.word = word

    def append_history_row(self, word, score):
        self.calls.append(("append_history_row", word, score))
        self.rows.append((word, score))

    def update_total(self, total):
        self.calls.append(("update_total", total))
        self.total = total

    def show_error(self, message):
        self.calls.append(("show_error", message))
        self.error = message

    def clear_error(self):
        self.calls.append(("clear_error",))
        self.error = None


@pytest.fixture
def board() -> Board:
    return Board.from_letters(TEST_LETTERS)


@pytest.fixture
def presenter() -> RecordingPresenter:
    return RecordingPresenter()
