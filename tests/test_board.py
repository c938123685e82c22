"""Tests for the rules engine."""

import pytest

from reversi.board import Board, BLACK, WHITE, EMPTY
from reversi.search import Strategy


def _play_random_game(seed, size=8):
    """Yield (board, color) before every move of a seeded random game."""
    board = Board(size)
    strategy = Strategy("random", seed=seed)
    while not board.terminal():
        color = board.to_move
        yield board, color
        move = strategy.select_move(board, color)
        if move is None:
            board.switch_turn()
        else:
            assert board.apply_move(move["x"], move["y"], color)


def test_start_position():
    board = Board()

    assert board.size == 8
    assert board.to_move == BLACK
    assert board.count() == (2, 2)
    assert board.grid[3][3] == WHITE
    assert board.grid[4][4] == WHITE
    assert board.grid[3][4] == BLACK
    assert board.grid[4][3] == BLACK
    assert board.legal_moves() == [
        {"x": 3, "y": 2},
        {"x": 2, "y": 3},
        {"x": 5, "y": 4},
        {"x": 4, "y": 5},
    ]
    assert len(board.legal_moves(WHITE)) == 4


@pytest.mark.parametrize("size", [0, 1, 3, 7, -2])
def test_rejects_sizes_without_a_centre(size):
    with pytest.raises(ValueError):
        Board(size)


def test_opening_move_flips_one_stone():
    board = Board()

    assert board.apply_move(3, 2, BLACK) is True
    assert board.grid[2][3] == BLACK
    assert board.grid[3][3] == BLACK
    assert board.count() == (4, 1)
    assert board.to_move == WHITE


def test_apply_move_defaults_to_side_to_move():
    board = Board()
    board.apply_move(3, 2)
    assert board.apply_move(2, 2) is True
    assert board.grid[3][3] == WHITE
    assert board.to_move == BLACK


@pytest.mark.parametrize("x, y", [(0, 0), (3, 3), (7, 7), (-1, 0), (0, -1), (8, 0), (0, 8)])
def test_illegal_move_is_rejected_without_mutation(x, y):
    board = Board()
    before = [list(row) for row in board.grid]

    assert board.apply_move(x, y, BLACK) is False
    assert board.grid == before
    assert board.to_move == BLACK


def test_out_of_bounds_is_never_legal():
    board = Board()
    for x, y in [(-1, -1), (-1, 3), (8, 3), (3, 8), (100, 100)]:
        assert board.is_legal(x, y, BLACK) is False
        assert board.is_legal(x, y, WHITE) is False


def test_adjacent_own_stone_does_not_bracket():
    # Black at (1,0) directly next to the target: no opponent in between
    board = Board.from_grid([
        [0, 1, -1, 1],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
    ])
    assert board.is_legal(0, 0, BLACK) is False
    assert board.is_legal(0, 0, WHITE) is True


def test_run_ending_at_empty_cell_is_not_flipped():
    board = Board.from_grid([
        [0, -1, 1, 0],
        [-1, 0, 0, 0],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
    ])

    assert board.apply_move(0, 0, BLACK) is True
    assert board.grid[0] == [BLACK, BLACK, BLACK, EMPTY]
    assert board.grid[1][0] == WHITE


def test_flips_in_several_directions_at_once():
    board = Board.from_grid([
        [0, -1, 1, 0],
        [-1, -1, 0, 0],
        [1, 0, 1, 0],
        [0, 0, 0, 0],
    ])

    assert board.apply_move(0, 0, BLACK) is True
    assert board.grid == [
        [1, 1, 1, 0],
        [1, 1, 0, 0],
        [1, 0, 1, 0],
        [0, 0, 0, 0],
    ]
    assert board.count() == (7, 0)


def test_one_side_blocked_is_not_terminal():
    board = Board.from_grid([
        [1, -1, 0, 0],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
    ], to_move=WHITE)

    assert board.legal_moves(WHITE) == []
    assert board.legal_moves(BLACK) == [{"x": 2, "y": 0}]
    assert board.terminal() is False
    assert board.winner() is None


def test_empty_board_is_terminal():
    board = Board.from_grid([[0] * 4 for _ in range(4)])

    assert board.legal_moves(BLACK) == []
    assert board.legal_moves(WHITE) == []
    assert board.terminal() is True
    assert board.winner() == 0


def test_smallest_board_starts_full_and_drawn():
    board = Board(2)

    assert board.count() == (2, 2)
    assert board.terminal() is True
    assert board.winner() == 0


def test_winner_on_finished_board():
    board = Board.from_grid([
        [1, 1],
        [1, -1],
    ])
    assert board.terminal() is True
    assert board.winner() == BLACK


def test_switch_turn_only_flips_side_to_move():
    board = Board()
    before = [list(row) for row in board.grid]

    board.switch_turn()

    assert board.to_move == WHITE
    assert board.grid == before


def test_copy_is_independent():
    board = Board()
    clone = board.copy()

    clone.apply_move(3, 2, BLACK)

    assert board.count() == (2, 2)
    assert board.to_move == BLACK
    assert clone.count() == (4, 1)
    assert clone.size == board.size


def test_copy_follows_the_same_move_sequence():
    board = Board()
    clone = board.copy()
    for x, y in [(3, 2), (2, 2), (2, 3), (4, 2)]:
        assert board.apply_move(x, y) == clone.apply_move(x, y)

    assert board.grid == clone.grid
    assert board.to_move == clone.to_move


def test_from_grid_validation():
    with pytest.raises(ValueError):
        Board.from_grid([[0, 0], [0]])
    with pytest.raises(ValueError):
        Board.from_grid([[0] * 3 for _ in range(3)])
    with pytest.raises(ValueError):
        Board.from_grid([[0, 2], [0, 0]])
    with pytest.raises(ValueError):
        Board.from_grid([[0, 0], [0, 0]], to_move=0)


def test_legal_grid_marks_legal_moves():
    board = Board()
    legal_grid = board.get_legal_grid()

    assert sum(map(sum, legal_grid)) == 4
    assert legal_grid[2][3] == 1
    assert legal_grid[5][4] == 1


def test_render_ascii():
    board = Board(4)
    assert board.render_ascii() == "\n".join([
        "  0 1 2 3",
        "0 . . . .",
        "1 . O X .",
        "2 . X O .",
        "3 . . . .",
    ])


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_legal_moves_agree_with_is_legal(seed):
    for board, color in _play_random_game(seed):
        for player in (BLACK, WHITE):
            legal = board.legal_moves(player)
            for y in range(board.size):
                for x in range(board.size):
                    assert ({"x": x, "y": y} in legal) == board.is_legal(x, y, player)
            assert board.terminal() == (not board.legal_moves(BLACK) and not board.legal_moves(WHITE))


@pytest.mark.parametrize("seed", [3, 4])
def test_accepted_move_adds_exactly_one_stone(seed):
    for board, color in _play_random_game(seed):
        moves = board.legal_moves(color)
        if not moves:
            continue
        black_before, white_before = board.count()
        mine_before = black_before if color == BLACK else white_before

        trial = board.copy()
        assert trial.apply_move(moves[-1]["x"], moves[-1]["y"], color)

        black_after, white_after = trial.count()
        mine_after = black_after if color == BLACK else white_after
        assert mine_after > mine_before + 1
        assert black_after + white_after == black_before + white_before + 1
        assert trial.to_move == -color
