"""Test direction resolution in isolation from the walk loop."""

import pytest

from src.pathfinder import (
    Direction,
    ErrorKind,
    Grid,
    Position,
    TraceError,
    TraversalState,
    neighbor_candidates,
    resolve_direction,
)


def state_at(row, column, direction=None):
    """Build a traversal state positioned at (row, column)."""
    position = Position(row, column)
    return TraversalState(position, direction, (position,), ())


def resolve(rows, row, column, direction=None):
    return resolve_direction(Grid.from_rows(rows), state_at(row, column, direction))


class TestNeighborCandidates:
    """Test which neighbours count as possible continuations."""

    def test_only_track_glyphs(self):
        grid = Grid.from_rows([" | ", "-@ ", " ? "])
        assert neighbor_candidates(grid, Position(1, 1)) == [Direction.UP, Direction.LEFT]

    def test_negative_index_does_not_wrap(self):
        """The row above the first row is out of bounds, not the last row."""
        grid = Grid.from_rows(["@", "|", "x"])
        assert neighbor_candidates(grid, Position(0, 0)) == [Direction.DOWN]

    def test_ragged_rows(self):
        """A neighbour beyond the end of a shorter row is out of bounds."""
        grid = Grid.from_rows(["@---", "x"])
        assert neighbor_candidates(grid, Position(0, 2)) == [Direction.LEFT, Direction.RIGHT]


class TestSingleCandidate:
    """Exactly one track glyph around the cell."""

    def test_leaving_start(self):
        assert resolve(["@-x"], 0, 0) is Direction.RIGHT

    def test_leaving_start_upwards(self):
        assert resolve(["x", "|", "@"], 2, 0) is Direction.UP

    def test_dead_end_is_broken_path(self):
        with pytest.raises(TraceError) as exc:
            resolve(["@-"], 0, 1, Direction.RIGHT)
        assert exc.value.kind is ErrorKind.BROKEN_PATH

    def test_no_candidates_is_broken_path(self):
        with pytest.raises(TraceError) as exc:
            resolve(["@"], 0, 0)
        assert exc.value.kind is ErrorKind.BROKEN_PATH


class TestPassThrough:
    """Several candidates on a cell that is not a turn."""

    def test_straight_through_crossing(self):
        rows = [" |", "---", " |"]
        assert resolve(rows, 1, 1, Direction.RIGHT) is Direction.RIGHT
        assert resolve(rows, 1, 1, Direction.DOWN) is Direction.DOWN

    def test_straight_along_segment(self):
        assert resolve(["@-x"], 0, 1, Direction.RIGHT) is Direction.RIGHT

    def test_start_on_junction(self):
        with pytest.raises(TraceError) as exc:
            resolve(["-@-"], 0, 1)
        assert exc.value.kind is ErrorKind.MISPLACED_START

    def test_letter_as_corner(self):
        assert resolve(["@-A", "  |"], 0, 2, Direction.RIGHT) is Direction.DOWN

    def test_letter_corner_with_two_exits_is_fork(self):
        with pytest.raises(TraceError) as exc:
            resolve(["  |", "@-A", "  |"], 1, 2, Direction.RIGHT)
        assert exc.value.kind is ErrorKind.FORK

    def test_straight_segment_cannot_bend(self):
        with pytest.raises(TraceError) as exc:
            resolve(["@--", "  |"], 0, 2, Direction.RIGHT)
        assert exc.value.kind is ErrorKind.BROKEN_PATH

    def test_missing_heading_off_start_asserts(self):
        """Only the start cell is ever resolved without a heading."""
        with pytest.raises(AssertionError):
            resolve(["---"], 0, 1)


class TestTurns:
    """A turn must change axis to exactly one exit."""

    def test_turn_down(self):
        assert resolve(["@-+", "  |", "  x"], 0, 2, Direction.RIGHT) is Direction.DOWN

    def test_turn_left(self):
        assert resolve(["x-+", "  |"], 0, 2, Direction.UP) is Direction.LEFT

    def test_fake_turn(self):
        with pytest.raises(TraceError) as exc:
            resolve(["@-+-x"], 0, 2, Direction.RIGHT)
        assert exc.value.kind is ErrorKind.FAKE_TURN
        assert exc.value.glyph == "+"

    def test_fork(self):
        with pytest.raises(TraceError) as exc:
            resolve(["  |", "@-+", "  |"], 1, 2, Direction.RIGHT)
        assert exc.value.kind is ErrorKind.FORK
        assert exc.value.position == Position(1, 2)

    def test_turn_ignores_straight_continuation(self):
        """The cell straight ahead of a turn is not an exit."""
        assert resolve(["@-+-", "  |"], 0, 2, Direction.RIGHT) is Direction.DOWN
