"""Locating the unique start and end markers."""

from typing import List

from .errors import ErrorKind, TraceError
from .glyphs import START, END, is_track_glyph
from .grid import Grid
from .models import Position


_MISSING = {
    START: ErrorKind.MISSING_START,
    END: ErrorKind.MISSING_END,
}

_MULTIPLE = {
    START: ErrorKind.MULTIPLE_START,
    END: ErrorKind.MULTIPLE_END,
}


def find_all(grid: Grid, glyph: str) -> List[Position]:
    """All positions holding `glyph`, in row-major order."""
    return [position for position in grid.positions() if grid.cell(position) == glyph]


def count_glyph(grid: Grid, glyph: str) -> int:
    return len(find_all(grid, glyph))


def locate(grid: Grid, marker: str) -> Position:
    """
    Find the single cell holding `marker`.

    Raises:
        TraceError: INVALID_GLYPH if the marker could never lie on a track,
            MISSING_* if it does not occur, MULTIPLE_* (with the exact count)
            if it occurs more than once.
    """
    if not is_track_glyph(marker):
        raise TraceError(ErrorKind.INVALID_GLYPH, glyph=marker)

    matches = find_all(grid, marker)

    if not matches:
        raise TraceError(_MISSING.get(marker, ErrorKind.MISSING_UNIQUE_GLYPH), glyph=marker)
    if len(matches) > 1:
        raise TraceError(
            _MULTIPLE.get(marker, ErrorKind.MULTIPLE_UNIQUE_GLYPH),
            glyph=marker,
            count=len(matches),
        )
    return matches[0]
