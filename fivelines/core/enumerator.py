"""
Full-board scans for legal moves.
"""
from collections import namedtuple

from .evaluator import evaluate

LegalMove = namedtuple('LegalMove', ['x', 'y', 'count'])


def any_legal_move_exists(board, ledger):
    """
    Check whether any empty cell admits a scoring placement.

    Stops at the first legal cell found.

    Args:
        board: Board to scan
        ledger: ScoredSegmentLedger of scored windows

    Returns:
        bool: True if at least one legal move exists
    """
    for x, y in board.empty_cells():
        if evaluate(board, ledger, x, y).count > 0:
            return True
    return False


def all_legal_moves(board, ledger):
    """
    List every legal move on the board.

    Args:
        board: Board to scan
        ledger: ScoredSegmentLedger of scored windows

    Returns:
        list: LegalMove(x, y, count) tuples in row-major order
    """
    moves = []
    for x, y in board.empty_cells():
        count = evaluate(board, ledger, x, y).count
        if count > 0:
            moves.append(LegalMove(x, y, count))
    return moves
