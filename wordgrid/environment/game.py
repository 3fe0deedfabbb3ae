"""Game controller tying the board, word session, ledger and presenter together."""

import json
import logging
import random
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional, Any
from pydantic import BaseModel, Field, ConfigDict

from .board import Board
from .dice import make_dice
from .errors import GameError, EmptyWordError
from .ledger import HistoryLedger
from .models import GameConfig, GameResult, MoveResult
from .presenter import Presenter
from .session import WordSession

logger = logging.getLogger(__name__)


class Game(BaseModel):
    """
    Top-level controller for one game.

    Owns the board, the word session and the history ledger, turns clicks
    into session/ledger calls, and reports everything through the presenter.
    Player errors never escape: each is shown, logged and returned as a
    failed MoveResult.

    Attributes:
        config: Game configuration
        board: The board for this game
        session: The word being built
        ledger: Submitted words and the running total
        presenter: Where state changes are shown
        rejections: Count of rejected moves by error code
        started_at: When start() was called
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: GameConfig = Field(default_factory=GameConfig)
    board: Board
    session: Optional[WordSession] = None
    ledger: HistoryLedger = Field(default_factory=HistoryLedger)
    presenter: Presenter = Field(default_factory=Presenter)
    rejections: Dict[str, int] = Field(default_factory=dict)
    started_at: Optional[datetime] = None

    def model_post_init(self, __context) -> None:
        """Attach a fresh word session to the board."""
        if self.session is None:
            self.session = WordSession(board=self.board)

    @classmethod
    def create(
        cls,
        config: Optional[GameConfig] = None,
        presenter: Optional[Presenter] = None,
        **config_kwargs: Any
    ) -> "Game":
        """
        Factory method to create a game with a fixed or freshly rolled board.

        Args:
            config: Optional GameConfig instance
            presenter: Optional presenter; defaults to one that shows nothing
            **config_kwargs: Config parameters if config not provided

        Returns:
            A new Game, not yet started
        """
        if config is None:
            config = GameConfig(**config_kwargs)

        if config.board:
            board = Board.from_letters(config.board)
            logger.info("Using fixed board %s", board.letters)
        else:
            board = Board.generate(make_dice(config.dice), random.Random(config.seed))
            logger.info("Rolled board %s (seed=%s)", board.letters, config.seed)

        return cls(config=config, board=board, presenter=presenter or Presenter())

    def start(self) -> None:
        """Show the board and reset the displays."""
        for index, letters in enumerate(self.board.tiles):
            self.presenter.render_tile(index, letters)
        self.presenter.show_current_word(self.session.word)
        self.presenter.update_total(self.ledger.total)
        self.presenter.clear_error()
        self.started_at = datetime.now()

    @property
    def word(self) -> str:
        return self.session.word

    @property
    def total(self) -> int:
        return self.ledger.total

    def _reject(self, error: GameError, action: str, index: Optional[int] = None) -> MoveResult:
        """Show a player error and build the failed result."""
        logger.info("Rejected %s%s: %s", action, f" {index}" if index is not None else "", error.message)
        self.rejections[error.code] = self.rejections.get(error.code, 0) + 1
        self.presenter.show_error(error.message)
        return MoveResult(
            valid=False,
            action=action,
            index=index,
            word=self.session.word,
            total=self.ledger.total,
            error=error.to_validation_error(),
        )

    def on_tile_clicked(self, index: int) -> MoveResult:
        """
        Handle a click on a tile.

        A tile already in the word is undone; any other tile is added.

        Args:
            index: Board index that was clicked

        Returns:
            MoveResult describing the outcome
        """
        if self.session.is_used(index):
            action = "DESELECT"
            try:
                word = self.session.deselect_tile(index)
            except GameError as e:
                return self._reject(e, action, index)
            self.presenter.set_tile_disabled(index, False)
        else:
            action = "SELECT"
            try:
                word = self.session.select_tile(index)
            except GameError as e:
                return self._reject(e, action, index)
            self.presenter.set_tile_disabled(index, True)

        self.presenter.show_current_word(word)
        self.presenter.clear_error()
        return MoveResult(valid=True, action=action, index=index, word=word, total=self.ledger.total)

    def on_submit_clicked(self) -> MoveResult:
        """
        Submit the current word.

        On success the word is scored and recorded, and every tile is freed.
        On failure the current word is left as it was.

        Returns:
            MoveResult describing the outcome
        """
        word = self.session.word
        try:
            if not word:
                raise EmptyWordError()
            score = self.ledger.submit(word)
        except GameError as e:
            return self._reject(e, "SUBMIT")

        self.presenter.append_history_row(word, score)
        self.presenter.update_total(self.ledger.total)
        for index in self.session.reset():
            self.presenter.set_tile_disabled(index, False)
        self.presenter.show_current_word("")
        self.presenter.clear_error()
        logger.info("Submitted %r for %d points", word, score)

        return MoveResult(valid=True, action="SUBMIT", word="", score=score, total=self.ledger.total)

    def get_state(self) -> Dict:
        """
        Get the current game state as a dictionary.

        Useful for serialization and logging.

        Returns:
            Dictionary containing game state
        """
        return {
            "board": self.board.rows(),
            "session": self.session.get_state(),
            "ledger": self.ledger.get_state(),
            "rejected_moves": sum(self.rejections.values()),
        }

    def get_result(self) -> GameResult:
        """
        Get the summary of the game so far.

        Returns:
            GameResult with the board, history and totals
        """
        ended_at = datetime.now()
        duration = (ended_at - self.started_at).total_seconds() if self.started_at else 0.0

        return GameResult(
            config=self.config,
            board=self.board.rows(),
            history=list(self.ledger.entries),
            total=self.ledger.total,
            words_submitted=len(self.ledger),
            rejected_moves=sum(self.rejections.values()),
            rejections_by_code=dict(self.rejections),
            started_at=self.started_at.isoformat() if self.started_at else "",
            ended_at=ended_at.isoformat(),
            duration_seconds=duration,
        )

    def save_result(self, path: str | Path) -> None:
        """
        Write the game summary to a JSON file.

        Args:
            path: Path to save the result file
        """
        result = self.get_result()
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w') as f:
            json.dump(result.model_dump(), f, indent=2, default=str)
