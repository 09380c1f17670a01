"""Data models for track-map traversal."""

from enum import Enum
from typing import List, Optional, NamedTuple, Tuple
from pydantic import BaseModel, Field


class Direction(Enum):
    """A heading on the grid, valued by its (row, column) delta."""
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def reverse(self) -> "Direction":
        return _REVERSE[self]

    @property
    def vertical(self) -> bool:
        return self in (Direction.UP, Direction.DOWN)

    def collinear(self, other: "Direction") -> bool:
        """True if both directions lie on the same axis."""
        return self.vertical == other.vertical


_REVERSE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Position(NamedTuple):
    """A cell on the grid."""
    row: int
    column: int

    def step(self, direction: Direction) -> "Position":
        d_row, d_column = direction.value
        return Position(self.row + d_row, self.column + d_column)


class TraversalState(NamedTuple):
    """Snapshot of a walk; every step produces a new one."""
    position: Position
    direction: Optional[Direction]
    visited: Tuple[Position, ...]
    letters: Tuple[Position, ...]


class PathResult(BaseModel):
    """Outcome of a successful traversal."""
    path: str
    word: str


class TraceIssue(BaseModel):
    """A single traversal or loading failure."""
    code: str
    glyph: Optional[str] = None
    count: Optional[int] = None
    row: Optional[int] = None
    column: Optional[int] = None


class PathReport(BaseModel):
    """Result of tracing a map."""
    valid: bool
    path: Optional[str] = None
    word: Optional[str] = None
    steps: int = 0
    error: Optional[TraceIssue] = None
    rendered: Optional[str] = None
    visited: List[Tuple[int, int]] = Field(default_factory=list)
