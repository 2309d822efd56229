"""
Exception types raised by the Five-Dot Lines core.

Rejected moves are not exceptions: ``Game.submit_move`` reports them through
``MoveResult.rejection``. These classes cover the places where a caller
bypasses the session and talks to the board or ledger directly.
"""


class FiveLinesError(Exception):
    """Base class for all Five-Dot Lines errors."""


class ConfigError(FiveLinesError, ValueError):
    """Invalid board size or seed line length."""


class OutOfBoundsError(FiveLinesError, ValueError):
    """A coordinate outside the board was given to ``Board.place``."""

    def __init__(self, x, y, size):
        super().__init__(f"cell ({x}, {y}) is outside the {size}x{size} board")
        self.x = x
        self.y = y
        self.size = size


class CellOccupiedError(FiveLinesError, ValueError):
    """``Board.place`` was called on a cell that already holds a dot."""

    def __init__(self, x, y):
        super().__init__(f"cell ({x}, {y}) is already occupied")
        self.x = x
        self.y = y


class LedgerConsistencyError(FiveLinesError):
    """A batch of windows overlaps a window already scored on the same axis."""
