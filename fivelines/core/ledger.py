"""
Append-only record of every scored window.
"""
import logging
from typing import Dict, Iterable, Iterator, List, Set

from .errors import LedgerConsistencyError
from .window import Axis, Cell, Window

logger = logging.getLogger(__name__)


class ScoredSegmentLedger:
    """
    Every window scored so far, grouped by axis.

    A window that shares a cell with an earlier entry on the same axis can
    never be scored. Windows on different axes may cross freely.
    """

    def __init__(self):
        self._entries: List[Window] = []
        self._by_axis: Dict[Axis, List[Window]] = {axis: [] for axis in Axis}
        self._covered: Dict[Axis, Set[Cell]] = {axis: set() for axis in Axis}

    def would_overlap(self, window: Window) -> bool:
        """
        Check a candidate against the windows already scored on its axis.

        Args:
            window: Candidate window

        Returns:
            bool: True if any of its cells is covered by a same-axis entry
        """
        covered = self._covered[window.axis]
        return any(cell in covered for cell in window.cells)

    def commit(self, windows: Iterable[Window]) -> None:
        """
        Append all windows scored by one move.

        The batch is checked as a whole before anything is stored, so either
        every window is added or none is. Windows of the same batch are not
        compared with each other: the left- and right-heavy windows of a move
        both contain the dot that move placed.

        Args:
            windows: Windows accepted by the evaluator for a single move

        Raises:
            LedgerConsistencyError: if a window overlaps an existing entry
                on its axis
        """
        batch = list(windows)
        for window in batch:
            if self.would_overlap(window):
                raise LedgerConsistencyError(
                    f"{window!r} overlaps a window already scored on {window.axis.name}")

        for window in batch:
            self._entries.append(window)
            self._by_axis[window.axis].append(window)
            self._covered[window.axis].update(window.cells)
        logger.debug("Ledger now holds %d windows (+%d)", len(self._entries), len(batch))

    def on_axis(self, axis: Axis) -> List[Window]:
        """Windows scored on one axis, in commit order."""
        return list(self._by_axis[axis])

    def covered_cells(self, axis: Axis) -> Set[Cell]:
        return set(self._covered[axis])

    def clear(self) -> None:
        self._entries.clear()
        for axis in Axis:
            self._by_axis[axis].clear()
            self._covered[axis].clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Window]:
        return iter(list(self._entries))

    def __contains__(self, window) -> bool:
        return window in self._by_axis.get(getattr(window, 'axis', None), ())
