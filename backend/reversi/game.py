"""Single human-vs-AI game session driven by the HTTP layer."""

import logging
from typing import Any, Dict, Optional

from .board import Board, Move
from .config import EngineConfig
from .search import Strategy

LOGGER = logging.getLogger(__name__)

class GameError(Exception):
    """Base class for session-level rejections"""

class IllegalMoveError(GameError):
    pass

class GameOverError(GameError):
    pass

class Game:
    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config if config is not None else EngineConfig()
        self.reset()

    @property
    def human_color(self) -> int:
        return self.config.human_color

    @property
    def ai_color(self) -> int:
        return -self.config.human_color

    def reset(self):
        """Start a new game; Black always moves first"""
        self.board = Board(self.config.size)
        self.ai = Strategy(self.config.strategy, self.config.max_depth, seed=self.config.seed)
        self.last_move: Optional[Move] = None
        LOGGER.info("New %dx%d game, human=%d, ai=%r", self.board.size, self.board.size,
                    self.human_color, self.ai)

    def play(self, x: int, y: int) -> Move:
        """Commit a human move"""
        self._check_turn(self.human_color)
        if not self.board.apply_move(x, y, self.human_color):
            raise IllegalMoveError(f"Invalid move: ({x}, {y})")

        self.last_move = {"x": x, "y": y}
        LOGGER.info("Human played %s", self.last_move)
        LOGGER.debug("Board after human move:\n%s", self.board.render_ascii())
        self._log_if_over()
        return self.last_move

    def ai_turn(self) -> Optional[Move]:
        """Let the AI play for its side; None means it had to pass"""
        self._check_turn(self.ai_color)
        move = self.ai.select_move(self.board, self.ai_color)
        if move is None:
            self.board.switch_turn()
            LOGGER.info("AI has no legal move and passes")
            return None

        self.board.apply_move(move["x"], move["y"], self.ai_color)
        self.last_move = move
        LOGGER.info("AI played %s", move)
        LOGGER.debug("Board after AI move:\n%s", self.board.render_ascii())
        self._log_if_over()
        return move

    def pass_turn(self):
        """Human pass, only allowed without legal moves"""
        self._check_turn(self.human_color)
        if self.board.legal_moves(self.human_color):
            raise IllegalMoveError("Legal moves available")
        self.board.switch_turn()
        LOGGER.info("Human passes")

    def _check_turn(self, color: int):
        if self.board.terminal():
            raise GameOverError("Game is over")
        if self.board.to_move != color:
            raise IllegalMoveError(f"Not the turn of {color}")

    def _log_if_over(self):
        if self.board.terminal():
            black_count, white_count = self.board.count()
            LOGGER.info("Game over: black=%d white=%d winner=%s", black_count, white_count,
                        self.board.winner())

    def state(self) -> Dict[str, Any]:
        """Snapshot of the board for presentation"""
        black_count, white_count = self.board.count()
        return {
            "grid": self.board.grid,
            "to_move": self.board.to_move,
            "black": black_count,
            "white": white_count,
            "legal": self.board.get_legal_grid(),
            "terminal": self.board.terminal(),
            "winner": self.board.winner(),
            "last_move": self.last_move,
        }
