"""History of submitted words and the running score."""

import logging
from typing import Dict, List, Set
from pydantic import BaseModel, Field

from .errors import DuplicateWordError, EmptyWordError
from .models import HistoryEntry
from ..verifiers.scoring import score_word

logger = logging.getLogger(__name__)


class HistoryLedger(BaseModel):
    """
    Records each word once and keeps the score total.

    Attributes:
        entries: Submitted words with their scores, oldest first
        total: Sum of all entry scores
    """

    entries: List[HistoryEntry] = Field(default_factory=list)
    total: int = 0
    _seen: Set[str] = set()

    def model_post_init(self, __context) -> None:
        """Rebuild the lookup set from any entries passed in."""
        self._seen = {entry.word for entry in self.entries}
        self.total = sum(entry.score for entry in self.entries)

    def __contains__(self, word: str) -> bool:
        return word in self._seen

    def __len__(self) -> int:
        return len(self.entries)

    def submit(self, word: str) -> int:
        """
        Record a word and add its score to the total.

        The Game rejects empty words before calling this; they are refused
        here as well so the ledger never records one.

        Args:
            word: The finished word

        Returns:
            Points scored for the word

        Raises:
            EmptyWordError: If the word is empty; nothing changes
            DuplicateWordError: If the word was submitted before; nothing changes
        """
        if not word:
            raise EmptyWordError()
        if word in self._seen:
            raise DuplicateWordError()

        entry = HistoryEntry(word=word, score=score_word(word))
        score = entry.score
        self._seen.add(word)
        self.entries.append(entry)
        self.total += score
        logger.debug("Recorded %r for %d points (total %d)", word, score, self.total)
        return score

    @property
    def words(self) -> List[str]:
        return [entry.word for entry in self.entries]

    def get_state(self) -> Dict:
        return {
            "words_submitted": len(self.entries),
            "total": self.total,
            "history": [entry.model_dump() for entry in self.entries],
        }
