"""
Board implementation for Five-Dot Lines.
"""
import numpy as np

from .config import DEFAULT_BOARD_SIZE, DEFAULT_LINE_LENGTH
from .errors import CellOccupiedError, OutOfBoundsError

EMPTY = 0
OCCUPIED = 1


class Board:
    """
    Represents an N x N Five-Dot Lines board.

    Board state representation (indexed ``state[y, x]``):
    - 0: empty cell
    - 1: dot

    Occupancy only ever grows between resets; nothing removes a dot.
    """

    def __init__(self, size=DEFAULT_BOARD_SIZE, line_length=DEFAULT_LINE_LENGTH, seeded=True):
        """
        Initialize a board.

        Args:
            size (int): Number of rows and columns
            line_length (int): Length of each arm of the seeded cross
            seeded (bool): Start from the seeded cross when True, from an
                empty grid otherwise
        """
        self.size = size
        self.line_length = line_length
        self.seeded = seeded
        self.state = np.zeros((self.size, self.size), dtype=np.int8)
        self.history = []
        if self.seeded:
            self._seed_cross()

    @property
    def center(self):
        return self.size // 2

    def in_bounds(self, x, y):
        return 0 <= x < self.size and 0 <= y < self.size

    def is_empty(self, x, y):
        """True if (x, y) is on the board and holds no dot."""
        return self.in_bounds(x, y) and self.state[y, x] == EMPTY

    def is_occupied(self, x, y):
        """True if (x, y) is on the board and holds a dot."""
        return self.in_bounds(x, y) and self.state[y, x] == OCCUPIED

    def place(self, x, y):
        """
        Place a dot.

        Args:
            x (int): Column (0 to size-1)
            y (int): Row (0 to size-1)

        Raises:
            OutOfBoundsError: if (x, y) is outside the board
            CellOccupiedError: if the cell already holds a dot
        """
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self.size)
        if self.state[y, x] != EMPTY:
            raise CellOccupiedError(x, y)
        self.state[y, x] = OCCUPIED
        self.history.append((x, y))

    def probe(self, x, y):
        """Return a read-only view of this board with (x, y) treated as occupied."""
        return ProbeView(self, x, y)

    def empty_cells(self):
        """
        Yield every empty cell, row by row.

        Yields:
            tuple: (x, y) of each empty cell
        """
        for y in range(self.size):
            for x in range(self.size):
                if self.state[y, x] == EMPTY:
                    yield (x, y)

    def occupied_count(self):
        return int(np.count_nonzero(self.state))

    def copy(self):
        new_board = Board(self.size, self.line_length, seeded=False)
        new_board.seeded = self.seeded
        new_board.state = self.state.copy()
        new_board.history = self.history[:]
        return new_board

    def reset(self):
        """Restore the starting layout and forget every placed dot."""
        self.state.fill(EMPTY)
        self.history = []
        if self.seeded:
            self._seed_cross()

    def _seed_cross(self):
        """
        Fill two adjacent rows and two adjacent columns through the center.

        Each arm is ``line_length`` cells long and runs from
        ``center - left`` to ``center + right`` where
        ``left = (line_length - 1) // 2``. Cells falling off the board are
        skipped.
        """
        left = (self.line_length - 1) // 2
        right = self.line_length - 1 - left
        center = self.center

        for row in (center, center + 1):
            for x in range(center - left, center + right + 1):
                if self.in_bounds(x, row):
                    self.state[row, x] = OCCUPIED

        for col in (center, center + 1):
            for y in range(center - left, center + right + 1):
                if self.in_bounds(col, y):
                    self.state[y, col] = OCCUPIED

    def __str__(self):
        rows = []
        for y in range(self.size):
            rows.append(''.join('●' if v == OCCUPIED else '·' for v in self.state[y]))
        return '\n'.join(rows)


class ProbeView:
    """
    Scratch overlay that reports one extra cell as occupied.

    Lets the evaluator measure runs as if a dot had been placed without
    writing to the board it wraps.
    """

    __slots__ = ('board', 'x', 'y')

    def __init__(self, board, x, y):
        self.board = board
        self.x = x
        self.y = y

    @property
    def size(self):
        return self.board.size

    def in_bounds(self, x, y):
        return self.board.in_bounds(x, y)

    def is_occupied(self, x, y):
        if x == self.x and y == self.y:
            return True
        return self.board.is_occupied(x, y)
