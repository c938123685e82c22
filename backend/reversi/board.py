from typing import List, Tuple, Optional, Sequence, TypedDict

# Constants
EMPTY = 0
BLACK = 1
WHITE = -1

DIRECTIONS = [(1, 0), (-1, 0), (0, 1), (0, -1), (1, 1), (1, -1), (-1, 1), (-1, -1)]

class Move(TypedDict):
    x: int
    y: int

class Board:
    def __init__(self, size: int = 8):
        if size < 2 or size % 2:
            raise ValueError(f"Board size must be an even number >= 2, got {size}")

        self.size = size
        self.grid = [[EMPTY for _ in range(size)] for _ in range(size)]
        self.to_move = BLACK  # Black moves first

        # Standard starting position, split diagonally around the centre
        mid = size // 2
        self.grid[mid - 1][mid - 1] = WHITE
        self.grid[mid][mid] = WHITE
        self.grid[mid - 1][mid] = BLACK
        self.grid[mid][mid - 1] = BLACK

    @classmethod
    def from_grid(cls, grid: Sequence[Sequence[int]], to_move: int = BLACK) -> 'Board':
        """Build a board from an explicit grid (rows indexed by y)"""
        size = len(grid)
        if any(len(row) != size for row in grid):
            raise ValueError("Grid must be square")
        if to_move not in (BLACK, WHITE):
            raise ValueError(f"Invalid side to move: {to_move}")

        board = cls(size)
        for row in grid:
            for cell in row:
                if cell not in (EMPTY, BLACK, WHITE):
                    raise ValueError(f"Invalid cell value: {cell}")
        board.grid = [list(row) for row in grid]
        board.to_move = to_move
        return board

    def copy(self) -> 'Board':
        """Create an independent copy of the board"""
        new_board = Board.__new__(Board)
        new_board.size = self.size
        new_board.grid = [list(row) for row in self.grid]
        new_board.to_move = self.to_move
        return new_board

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def legal_moves(self, color: Optional[int] = None) -> List[Move]:
        """Get legal moves for the given color (or current side to move)"""
        if color is None:
            color = self.to_move

        legal_moves = []
        for y in range(self.size):
            for x in range(self.size):
                if self.is_legal(x, y, color):
                    legal_moves.append({"x": x, "y": y})
        return legal_moves

    def is_legal(self, x: int, y: int, color: Optional[int] = None) -> bool:
        """Check if placing a piece at (x, y) is legal for the given color"""
        if color is None:
            color = self.to_move
        if not self.in_bounds(x, y) or self.grid[y][x] != EMPTY:
            return False

        for dx, dy in DIRECTIONS:
            if self._bracketed_run(x, y, dx, dy, color):
                return True
        return False

    def _bracketed_run(self, x: int, y: int, dx: int, dy: int, color: int) -> List[Tuple[int, int]]:
        """Opponent cells in one direction that would flip, empty if none"""
        opponent = -color
        x += dx
        y += dy
        run = []

        while self.in_bounds(x, y) and self.grid[y][x] == opponent:
            run.append((x, y))
            x += dx
            y += dy

        # The run only counts when closed off by one of our own pieces
        if run and self.in_bounds(x, y) and self.grid[y][x] == color:
            return run
        return []

    def apply_move(self, x: int, y: int, color: Optional[int] = None) -> bool:
        """Place a piece, flip bracketed runs and pass the turn.

        Returns False and leaves the board untouched if the move is illegal.
        """
        if color is None:
            color = self.to_move

        if not self.is_legal(x, y, color):
            return False

        # Collect every run before touching the grid so directions stay independent
        flips = []
        for dx, dy in DIRECTIONS:
            flips.extend(self._bracketed_run(x, y, dx, dy, color))

        self.grid[y][x] = color
        for flip_x, flip_y in flips:
            self.grid[flip_y][flip_x] = color

        self.to_move = -color
        return True

    def switch_turn(self):
        """Hand the move to the other side without touching the grid (a pass)"""
        self.to_move = -self.to_move

    def terminal(self) -> bool:
        """Check if the game is over"""
        return not self.legal_moves(BLACK) and not self.legal_moves(WHITE)

    def count(self) -> Tuple[int, int]:
        """Return (black_count, white_count)"""
        black_count = sum(1 for row in self.grid for cell in row if cell == BLACK)
        white_count = sum(1 for row in self.grid for cell in row if cell == WHITE)
        return black_count, white_count

    def get_legal_grid(self, color: Optional[int] = None) -> List[List[int]]:
        """Get grid showing legal moves (1 for legal, 0 for illegal)"""
        legal_grid = [[0 for _ in range(self.size)] for _ in range(self.size)]
        for move in self.legal_moves(color):
            legal_grid[move["y"]][move["x"]] = 1
        return legal_grid

    def winner(self) -> Optional[int]:
        """Return winner: 1 (Black), -1 (White), 0 (Draw), or None (ongoing)"""
        if not self.terminal():
            return None

        black_count, white_count = self.count()
        if black_count > white_count:
            return BLACK
        elif white_count > black_count:
            return WHITE
        else:
            return 0

    def render_ascii(self) -> str:
        """Return a plain-text view of the board (X = Black, O = White)"""
        symbols = {EMPTY: ".", BLACK: "X", WHITE: "O"}
        lines = ["  " + " ".join(str(x) for x in range(self.size))]
        for y, row in enumerate(self.grid):
            lines.append(f"{y} " + " ".join(symbols[cell] for cell in row))
        return "\n".join(lines)
