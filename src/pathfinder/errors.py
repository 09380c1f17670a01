"""Closed taxonomy of traversal failures."""

from enum import Enum
from typing import Optional

from .models import Position, TraceIssue


class ErrorKind(str, Enum):
    MISSING_START = "MISSING_START"
    MISSING_END = "MISSING_END"
    MULTIPLE_START = "MULTIPLE_START"
    MULTIPLE_END = "MULTIPLE_END"
    MISSING_UNIQUE_GLYPH = "MISSING_UNIQUE_GLYPH"
    MULTIPLE_UNIQUE_GLYPH = "MULTIPLE_UNIQUE_GLYPH"
    INVALID_GLYPH = "INVALID_GLYPH"
    MISPLACED_START = "MISPLACED_START"
    FORK = "FORK"
    FAKE_TURN = "FAKE_TURN"
    BROKEN_PATH = "BROKEN_PATH"


class TraceError(Exception):
    """
    A structural defect that stops a traversal.

    Attributes:
        kind: Which defect was found
        glyph: Offending glyph, where one applies
        count: Observed number of occurrences, for multiplicity defects
        position: Cell where the defect was detected, for mid-walk defects
    """

    def __init__(
        self,
        kind: ErrorKind,
        glyph: Optional[str] = None,
        count: Optional[int] = None,
        position: Optional[Position] = None,
    ):
        self.kind = kind
        self.glyph = glyph
        self.count = count
        self.position = position
        super().__init__(kind.value)

    def __repr__(self) -> str:
        return (
            f"TraceError({self.kind.value}, glyph={self.glyph!r}, "
            f"count={self.count!r}, position={self.position!r})"
        )

    def to_issue(self) -> TraceIssue:
        return TraceIssue(
            code=self.kind.value,
            glyph=self.glyph,
            count=self.count,
            row=self.position.row if self.position else None,
            column=self.position.column if self.position else None,
        )
