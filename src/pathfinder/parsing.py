"""Map loading utilities."""

import re
from pathlib import Path
from typing import List, Tuple

from .errors import ErrorKind
from .grid import Grid
from .models import TraceIssue


def extract_map_content(text: str) -> str:
    """Extract content from between <map> and </map> tags."""
    match = re.search(r'<map>(.*?)</map>', text, re.DOTALL)
    if match:
        return match.group(1)
    return text


def parse_map(text: str) -> Tuple[Grid, List[TraceIssue]]:
    """
    Parse a text drawing into a grid with error collection.

    Leading whitespace on each line is significant and kept. Wholly blank
    lines before and after the drawing are dropped. Every cell that is
    neither a track glyph nor blank is reported as INVALID_GLYPH.

    Returns a tuple of (grid, errors).
    """
    lines = [line.rstrip('\r') for line in extract_map_content(text).split('\n')]

    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()

    grid = Grid.from_rows(lines)
    return grid, check_cells(grid)


def check_cells(grid: Grid) -> List[TraceIssue]:
    """Report every cell that is neither a track glyph nor blank as INVALID_GLYPH."""
    return [
        TraceIssue(
            code=ErrorKind.INVALID_GLYPH.value,
            glyph=grid.cell(position),
            row=position.row,
            column=position.column,
        )
        for position in grid.invalid_cells()
    ]


def load_map(path: str | Path) -> Tuple[Grid, List[TraceIssue]]:
    """Read and parse a map file."""
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Map file not found: {path}")

    return parse_map(path.read_text(encoding="utf-8"))
