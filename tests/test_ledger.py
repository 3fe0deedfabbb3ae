"""Test the history ledger."""

import pytest

from wordgrid.environment import HistoryLedger, HistoryEntry, DuplicateWordError, EmptyWordError


class TestSubmit:
    """Test cases for recording words."""

    def test_submit_returns_score(self):
        """A new word is scored and added to the total."""
        ledger = HistoryLedger()
        assert ledger.submit("CAT") == 1
        assert ledger.total == 1
        assert ledger.entries == [HistoryEntry(word="CAT", score=1)]

    def test_duplicate_rejected_without_change(self):
        """A repeated word fails and leaves the ledger alone."""
        ledger = HistoryLedger()
        ledger.submit("CAT")
        with pytest.raises(DuplicateWordError) as exc_info:
            ledger.submit("CAT")
        assert exc_info.value.message == "You have already submitted this word before."
        assert ledger.total == 1
        assert len(ledger) == 1

    def test_entries_in_submission_order(self):
        """Entries are kept oldest first."""
        ledger = HistoryLedger()
        for word in ("CAT", "WORDS", "AT"):
            ledger.submit(word)
        assert ledger.words == ["CAT", "WORDS", "AT"]
        assert [e.score for e in ledger.entries] == [1, 2, 0]

    def test_total_is_sum_of_scores(self):
        """The total always equals the sum of entry scores."""
        ledger = HistoryLedger()
        for word in ("CAT", "PLAYER", "ABCDEFGH", "ABCDEFG"):
            ledger.submit(word)
        assert ledger.total == sum(e.score for e in ledger.entries) == 1 + 3 + 11 + 5

    def test_zero_point_words_are_still_recorded(self):
        """Short words score nothing but count as submitted."""
        ledger = HistoryLedger()
        assert ledger.submit("AT") == 0
        assert "AT" in ledger
        with pytest.raises(DuplicateWordError):
            ledger.submit("AT")

    def test_empty_word_rejected_without_change(self):
        """An empty word is refused and leaves no trace, even on retry."""
        ledger = HistoryLedger()
        with pytest.raises(EmptyWordError):
            ledger.submit("")
        assert "" not in ledger
        assert len(ledger) == 0
        assert ledger.total == 0
        with pytest.raises(EmptyWordError):
            ledger.submit("")

    def test_words_are_case_sensitive(self):
        """Words are compared exactly as built from the tiles."""
        ledger = HistoryLedger()
        ledger.submit("QuIT")
        assert "QUIT" not in ledger


class TestState:
    """Test cases for ledger state."""

    def test_rebuilt_from_entries(self):
        """A ledger built from entries knows those words and their total."""
        ledger = HistoryLedger(entries=[HistoryEntry(word="CAT", score=1), HistoryEntry(word="WORDS", score=2)])
        assert "CAT" in ledger
        assert ledger.total == 3

    def test_get_state(self):
        """State includes count, total and history rows."""
        ledger = HistoryLedger()
        ledger.submit("CAT")
        assert ledger.get_state() == {
            "words_submitted": 1,
            "total": 1,
            "history": [{"word": "CAT", "score": 1}],
        }
