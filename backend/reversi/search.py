import logging
import random
from enum import Enum
from typing import Optional, List, Tuple
from .board import Board, Move
from .eval import evaluate, stone_differential

LOGGER = logging.getLogger(__name__)

INF = float('inf')

class StrategyKind(str, Enum):
    RANDOM = "random"
    GREEDY = "greedy"
    MINIMAX = "minimax"

def minimax(board: Board, depth: int, mover: int, maximizer: int) -> int:
    """Plain minimax to a fixed depth, scored by evaluate() from maximizer's side.

    A mover without legal moves passes: the same board is searched one ply
    deeper with the other side to move.
    """
    if depth <= 0 or board.terminal():
        return evaluate(board, maximizer)

    legal_moves = board.legal_moves(mover)
    if not legal_moves:
        return minimax(board, depth - 1, -mover, maximizer)

    maximizing = mover == maximizer
    best = -INF if maximizing else INF
    for move in legal_moves:
        child = board.copy()
        child.apply_move(move["x"], move["y"], mover)
        score = minimax(child, depth - 1, -mover, maximizer)
        if maximizing:
            best = max(best, score)
        else:
            best = min(best, score)
    return best

class Strategy:
    def __init__(self, kind: str = StrategyKind.GREEDY, max_depth: int = 3, seed: Optional[int] = None):
        self.kind = StrategyKind(kind)
        if max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {max_depth}")
        self.max_depth = max_depth
        self._rng = random.Random(seed)

    def __repr__(self) -> str:
        return f"Strategy(kind={self.kind.value!r}, max_depth={self.max_depth})"

    def select_move(self, board: Board, color: int) -> Optional[Move]:
        """Pick a move for color, or None when color has to pass"""
        legal_moves = board.legal_moves(color)
        if not legal_moves:
            LOGGER.debug("No legal moves for %d, passing", color)
            return None

        if self.kind is StrategyKind.RANDOM:
            return self._rng.choice(legal_moves)
        if self.kind is StrategyKind.GREEDY:
            return self._best_of(board, color, legal_moves, self._greedy_score)
        return self._best_of(board, color, legal_moves, self._minimax_score)

    def _greedy_score(self, child: Board, color: int) -> int:
        return stone_differential(child, color)

    def _minimax_score(self, child: Board, color: int) -> int:
        return minimax(child, self.max_depth - 1, -color, color)

    def _best_of(self, board: Board, color: int, moves: List[Move], score_fn) -> Move:
        """First move with the strictly highest score wins"""
        best_move = moves[0]
        best_score = -INF
        scored: List[Tuple[Move, int]] = []

        for move in moves:
            child = board.copy()
            child.apply_move(move["x"], move["y"], color)
            score = score_fn(child, color)
            scored.append((move, score))
            if score > best_score:
                best_score = score
                best_move = move

        if LOGGER.isEnabledFor(logging.DEBUG):
            for move, score in scored:
                LOGGER.debug("Candidate %s score=%s", move, score)
        LOGGER.debug("%s selected %s with score %s", self, best_move, best_score)
        return best_move
