"""
Direction resolution: the rules that pick the single continuation of a track.

At each cell the resolver looks at the four neighbours, keeps those holding
a track glyph, and decides:

1. Exactly one candidate: follow it, unless it leads straight back the way
   we came (a dead end, reported as a broken path).
2. Several candidates on a non-turn cell: keep going straight through the
   crossing. When straight ahead is not available, a letter may act as a
   corner (two perpendicular exits make a fork), while a straight segment
   (`-` or `|`) cannot bend and is reported as a broken path. Start must
   never sit on a junction.
3. A turn (`+`): must change axis, to exactly one perpendicular exit.
"""

from typing import List

from .errors import ErrorKind, TraceError
from .glyphs import GlyphKind, classify, is_track_glyph
from .grid import Grid
from .models import Direction, Position, TraversalState


def neighbor_candidates(grid: Grid, position: Position) -> List[Direction]:
    """Directions whose neighbouring cell is in bounds and holds a track glyph."""
    return [
        direction for direction in Direction
        if is_track_glyph(grid.cell(position.step(direction)))
    ]


def _perpendicular(candidates: List[Direction], heading: Direction) -> List[Direction]:
    return [d for d in candidates if not d.collinear(heading)]


def resolve_direction(grid: Grid, state: TraversalState) -> Direction:
    """
    Compute the next direction of travel from `state`.

    Raises:
        TraceError: BROKEN_PATH, MISPLACED_START, FORK or FAKE_TURN.
    """
    position, heading = state.position, state.direction
    kind = classify(grid.cell(position))
    candidates = neighbor_candidates(grid, position)

    if not candidates:
        raise TraceError(ErrorKind.BROKEN_PATH, position=position)

    if len(candidates) == 1:
        only = candidates[0]
        if heading is not None and only is heading.reverse:
            raise TraceError(ErrorKind.BROKEN_PATH, position=position)
        return only

    if kind is GlyphKind.START:
        raise TraceError(ErrorKind.MISPLACED_START, glyph=grid.cell(position), position=position)

    assert heading is not None, "only the start cell has no heading"

    if kind is GlyphKind.TURN:
        exits = _perpendicular(candidates, heading)
        if len(exits) > 1:
            raise TraceError(ErrorKind.FORK, glyph=grid.cell(position), position=position)
        if not exits:
            raise TraceError(ErrorKind.FAKE_TURN, glyph=grid.cell(position), position=position)
        return exits[0]

    if heading in candidates:
        return heading

    # Straight ahead is gone: only a letter may bend the track.
    if kind is not GlyphKind.LETTER:
        raise TraceError(ErrorKind.BROKEN_PATH, glyph=grid.cell(position), position=position)

    exits = _perpendicular(candidates, heading)
    if len(exits) > 1:
        raise TraceError(ErrorKind.FORK, glyph=grid.cell(position), position=position)
    return exits[0]
