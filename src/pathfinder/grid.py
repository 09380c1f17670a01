"""Read-only grid model and path rendering."""

from typing import Iterable, List, Optional, Sequence, Tuple, Union
from pydantic import BaseModel, ConfigDict

from .glyphs import is_field_value
from .models import Position


class Grid(BaseModel):
    """
    Immutable view over a possibly ragged 2D character array.

    Rows may differ in length; a position is only in bounds for the row
    it sits on. Negative indices are always out of bounds.
    """

    model_config = ConfigDict(frozen=True)

    rows: Tuple[Tuple[str, ...], ...] = ()

    @classmethod
    def from_rows(cls, rows: Iterable[Union[str, Sequence[str]]]) -> "Grid":
        """Build a grid from strings or from sequences of single-character cells."""
        return cls(rows=tuple(tuple(row) for row in rows))

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def cell_count(self) -> int:
        return sum(len(row) for row in self.rows)

    def in_bounds(self, position: Position) -> bool:
        row, column = position
        return 0 <= row < len(self.rows) and 0 <= column < len(self.rows[row])

    def cell(self, position: Position) -> Optional[str]:
        """Glyph at `position`, or None when out of bounds."""
        if not self.in_bounds(position):
            return None
        return self.rows[position.row][position.column]

    def positions(self) -> Iterable[Position]:
        for r, row in enumerate(self.rows):
            for c in range(len(row)):
                yield Position(r, c)

    def invalid_cells(self) -> List[Position]:
        """Positions holding neither a track glyph nor a blank, in row-major order."""
        return [p for p in self.positions() if not is_field_value(self.cell(p))]


def render_path(grid: Grid, positions: Iterable[Position], fill: str = ' ') -> str:
    """Render only the given cells, keeping the grid's shape."""
    canvas = [[fill] * len(row) for row in grid.rows]
    for position in positions:
        if grid.in_bounds(position):
            canvas[position.row][position.column] = grid.rows[position.row][position.column]

    lines = [''.join(row).rstrip(fill) for row in canvas]
    while lines and not lines[-1]:
        lines.pop()
    return '\n'.join(lines)
