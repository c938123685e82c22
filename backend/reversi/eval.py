from typing import List, Tuple
from .board import Board, BLACK

# Weights are part of the AI's observable behaviour: changing them changes its moves
STONE_WEIGHT = 1
CORNER_WEIGHT = 5

def corners(size: int) -> List[Tuple[int, int]]:
    """Corner coordinates (x, y) of a size x size board, none below 2x2"""
    if size < 2:
        return []
    last = size - 1
    return [(0, 0), (0, last), (last, 0), (last, last)]

def stone_differential(board: Board, color: int) -> int:
    """Stones owned by color minus stones owned by its opponent"""
    black_count, white_count = board.count()
    if color == BLACK:
        return black_count - white_count
    else:
        return white_count - black_count

def corner_score(board: Board, color: int) -> int:
    """+CORNER_WEIGHT per corner held by color, -CORNER_WEIGHT per corner held by the opponent"""
    score = 0
    for x, y in corners(board.size):
        if board.grid[y][x] == color:
            score += CORNER_WEIGHT
        elif board.grid[y][x] == -color:
            score -= CORNER_WEIGHT
    return score

def evaluate(board: Board, color: int) -> int:
    """Evaluate position for the given color (positive = good for color)"""
    return STONE_WEIGHT * stone_differential(board, color) + corner_score(board, color)
