"""
Tests for ScoredSegmentLedger.
"""
import pytest
from fivelines.core.errors import LedgerConsistencyError
from fivelines.core.ledger import ScoredSegmentLedger
from fivelines.core.window import Axis, Window


def test_empty_ledger():
    """Test that a new ledger holds nothing."""
    ledger = ScoredSegmentLedger()

    assert len(ledger) == 0
    assert list(ledger) == []
    for axis in Axis:
        assert ledger.on_axis(axis) == []
    assert not ledger.would_overlap(Window.from_start(Axis.HORIZONTAL, 0, 0))


def test_would_overlap_same_axis():
    """Test that sharing a single cell on the same axis is an overlap."""
    ledger = ScoredSegmentLedger()
    ledger.commit([Window.from_start(Axis.HORIZONTAL, 5, 8)])

    assert ledger.would_overlap(Window.from_start(Axis.HORIZONTAL, 9, 8))
    assert ledger.would_overlap(Window.from_start(Axis.HORIZONTAL, 1, 8))
    assert not ledger.would_overlap(Window.from_start(Axis.HORIZONTAL, 10, 8))
    assert not ledger.would_overlap(Window.from_start(Axis.HORIZONTAL, 5, 9))


def test_other_axes_never_overlap():
    """Test that windows on different axes may share cells."""
    ledger = ScoredSegmentLedger()
    ledger.commit([Window.from_start(Axis.HORIZONTAL, 5, 8)])

    assert not ledger.would_overlap(Window.from_start(Axis.VERTICAL, 7, 6))
    assert not ledger.would_overlap(Window.from_start(Axis.DIAGONAL_DOWN, 5, 6))
    assert not ledger.would_overlap(Window.from_start(Axis.DIAGONAL_UP, 5, 8))


def test_commit_groups_by_axis():
    """Test that committed windows are kept in order and grouped by axis."""
    ledger = ScoredSegmentLedger()
    h1 = Window.from_start(Axis.HORIZONTAL, 0, 0)
    v1 = Window.from_start(Axis.VERTICAL, 0, 0)
    h2 = Window.from_start(Axis.HORIZONTAL, 0, 1)

    ledger.commit([h1, v1])
    ledger.commit([h2])

    assert len(ledger) == 3
    assert list(ledger) == [h1, v1, h2]
    assert ledger.on_axis(Axis.HORIZONTAL) == [h1, h2]
    assert ledger.on_axis(Axis.VERTICAL) == [v1]
    assert ledger.on_axis(Axis.DIAGONAL_UP) == []
    assert h2 in ledger
    assert Window.from_start(Axis.DIAGONAL_UP, 0, 4) not in ledger
    assert ledger.covered_cells(Axis.VERTICAL) == {(0, y) for y in range(5)}


def test_commit_same_move_windows_sharing_new_dot():
    """Test that both heavy windows of one move can be committed together."""
    ledger = ScoredSegmentLedger()
    left_heavy = Window.from_start(Axis.HORIZONTAL, 6, 8)
    right_heavy = Window.from_start(Axis.HORIZONTAL, 10, 8)

    ledger.commit([left_heavy, right_heavy])
    assert len(ledger) == 2


def test_commit_is_atomic():
    """Test that an overlapping batch is refused as a whole."""
    ledger = ScoredSegmentLedger()
    scored = Window.from_start(Axis.HORIZONTAL, 5, 8)
    ledger.commit([scored])

    fresh = Window.from_start(Axis.VERTICAL, 0, 0)
    clash = Window.from_start(Axis.HORIZONTAL, 9, 8)
    with pytest.raises(LedgerConsistencyError):
        ledger.commit([fresh, clash])

    assert len(ledger) == 1
    assert fresh not in ledger
    assert not ledger.would_overlap(fresh)


def test_commit_accepts_generator():
    """Test committing from any iterable."""
    ledger = ScoredSegmentLedger()
    ledger.commit(Window.from_start(Axis.VERTICAL, x, 0) for x in range(3))

    assert len(ledger) == 3


def test_iteration_is_a_snapshot():
    """Test that the ledger cannot be modified through iteration results."""
    ledger = ScoredSegmentLedger()
    ledger.commit([Window.from_start(Axis.HORIZONTAL, 0, 0)])

    entries = ledger.on_axis(Axis.HORIZONTAL)
    entries.clear()
    assert len(ledger.on_axis(Axis.HORIZONTAL)) == 1


def test_clear():
    """Test that clear empties every axis."""
    ledger = ScoredSegmentLedger()
    window = Window.from_start(Axis.DIAGONAL_DOWN, 0, 0)
    ledger.commit([window])

    ledger.clear()
    assert len(ledger) == 0
    assert not ledger.would_overlap(window)
    assert ledger.on_axis(Axis.DIAGONAL_DOWN) == []
