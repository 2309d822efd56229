"""
Move evaluation: which five-cell windows a placement would score.
"""
from collections import namedtuple

from .config import WINDOW_LENGTH
from .window import Axis, Window

# count: number of accepted windows (0-8); windows: tuple of Window
Evaluation = namedtuple('Evaluation', ['count', 'windows'])

NO_SCORE = Evaluation(0, ())


def count_run(view, x, y, dx, dy):
    """
    Count contiguous dots from (x, y) (exclusive) in direction (dx, dy).

    Args:
        view: Board or probe view exposing ``is_occupied(x, y)``
        x (int): Starting column
        y (int): Starting row
        dx (int): Column step (-1, 0, 1)
        dy (int): Row step (-1, 0, 1)

    Returns:
        int: Number of consecutive occupied cells
    """
    count = 0
    cx, cy = x + dx, y + dy
    while view.is_occupied(cx, cy):
        count += 1
        cx += dx
        cy += dy
    return count


def candidate_windows(view, x, y, axis):
    """
    Build the windows through (x, y) on one axis, ignoring the ledger.

    With ``left`` dots on the negative side and ``right`` on the positive
    side, the left-heavy window takes as many cells as it can from the left
    (at most four) and the rest from the right; the right-heavy window does
    the opposite. A run of exactly five yields one window because both
    variants coincide.

    Args:
        view: Board view in which (x, y) already reads as occupied
        x (int): Column of the placed dot
        y (int): Row of the placed dot
        axis (Axis): Axis to measure

    Returns:
        list: Zero, one or two distinct Window objects containing (x, y)
    """
    dx, dy = axis.dx, axis.dy
    left = count_run(view, x, y, -dx, -dy)
    right = count_run(view, x, y, dx, dy)
    if left + 1 + right < WINDOW_LENGTH:
        return []

    span = WINDOW_LENGTH - 1
    windows = []

    # Left-heavy
    take_left = min(span, left)
    take_right = span - take_left
    if take_right <= right:
        windows.append(Window.from_start(axis, x - dx * take_left, y - dy * take_left))

    # Right-heavy
    take_right = min(span, right)
    take_left = span - take_right
    if take_left <= left:
        window = Window.from_start(axis, x - dx * take_left, y - dy * take_left)
        if window not in windows:
            windows.append(window)

    return windows


def evaluate(board, ledger, x, y):
    """
    Work out what placing a dot at (x, y) would score.

    Neither the board nor the ledger is modified. An occupied or
    off-board cell simply scores nothing.

    Args:
        board: Board to read
        ledger: ScoredSegmentLedger holding previously scored windows
        x (int): Column of the candidate cell
        y (int): Row of the candidate cell

    Returns:
        Evaluation: (count, windows), windows ordered by axis with the
            left-heavy window first
    """
    if not board.is_empty(x, y):
        return NO_SCORE

    view = board.probe(x, y)
    accepted = []
    for axis in Axis:
        for window in candidate_windows(view, x, y, axis):
            if ledger.would_overlap(window):
                continue
            accepted.append(window)

    return Evaluation(len(accepted), tuple(accepted))
