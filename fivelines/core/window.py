"""
Axes and five-cell scoring windows.
"""
from enum import Enum
from typing import FrozenSet, Tuple

from .config import WINDOW_LENGTH

Cell = Tuple[int, int]


class Axis(Enum):
    """
    The four line directions, each stored as a unit (dx, dy) step.

    A direction and its negation are the same axis, so only one of each
    pair is listed.
    """
    HORIZONTAL = (1, 0)
    VERTICAL = (0, 1)
    DIAGONAL_DOWN = (1, 1)   # ↘
    DIAGONAL_UP = (1, -1)    # ↗

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


class Window:
    """
    Exactly five collinear, unit-step-adjacent cells on one axis.

    Two windows are equal when they lie on the same axis and have the same
    endpoints, whichever end the cells were listed from.
    """

    __slots__ = ('axis', 'cells')

    def __init__(self, axis: Axis, cells):
        cells = tuple((int(x), int(y)) for x, y in cells)
        if len(cells) != WINDOW_LENGTH:
            raise ValueError(f"a window holds exactly {WINDOW_LENGTH} cells, got {len(cells)}")
        for (x0, y0), (x1, y1) in zip(cells, cells[1:]):
            step = (x1 - x0, y1 - y0)
            if step != axis.value and step != (-axis.dx, -axis.dy):
                raise ValueError(f"cells {cells} are not unit steps along {axis.name}")
        object.__setattr__(self, 'axis', axis)
        object.__setattr__(self, 'cells', cells)

    def __setattr__(self, name, value):
        raise AttributeError("Window is immutable")

    @classmethod
    def from_start(cls, axis: Axis, x: int, y: int) -> 'Window':
        """
        Build the window that starts at (x, y) and walks four steps along axis.

        Args:
            axis: Axis of the window
            x (int): Column of the first cell
            y (int): Row of the first cell

        Returns:
            Window: The five-cell window
        """
        cells = [(x + axis.dx * k, y + axis.dy * k) for k in range(WINDOW_LENGTH)]
        return cls(axis, cells)

    @property
    def endpoints(self) -> Tuple[Cell, Cell]:
        """Both end cells, sorted, so the value does not depend on walk order."""
        first, last = sorted((self.cells[0], self.cells[-1]))
        return first, last

    @property
    def start(self) -> Cell:
        return self.cells[0]

    @property
    def end(self) -> Cell:
        return self.cells[-1]

    @property
    def cell_set(self) -> FrozenSet[Cell]:
        return frozenset(self.cells)

    def shares_cell_with(self, other: 'Window') -> bool:
        return not self.cell_set.isdisjoint(other.cells)

    def _key(self):
        return self.axis, self.endpoints

    def __eq__(self, other):
        if not isinstance(other, Window):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __contains__(self, cell):
        return tuple(cell) in self.cells

    def __iter__(self):
        return iter(self.cells)

    def __len__(self):
        return len(self.cells)

    def __repr__(self):
        (x1, y1), (x2, y2) = self.endpoints
        return f"Window({self.axis.name}, ({x1}, {y1})->({x2}, {y2}))"
