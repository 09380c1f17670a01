"""Reduce a recorded walk into its output strings."""

from typing import Iterable, Sequence

from .grid import Grid
from .models import PathResult, Position


def collect(grid: Grid, visited: Sequence[Position], letter_visits: Iterable[Position]) -> PathResult:
    """
    Build the path and word for a finished walk.

    The path repeats glyphs as often as they were walked over. The word keeps
    each letter *position* once, at its first visit, so a crossing letter is
    collected a single time while two equal letters in different cells are
    both kept.
    """
    path = ''.join(grid.cell(position) for position in visited)

    seen = set()
    word = []
    for position in letter_visits:
        if position in seen:
            continue
        seen.add(position)
        word.append(grid.cell(position))

    return PathResult(path=path, word=''.join(word))
