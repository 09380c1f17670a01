"""
Traversal engine for track maps.

Walks from the start marker to the end marker one cell at a time:
1. Both markers are located (and checked for uniqueness) before walking
2. Every cell must hold a track glyph or a blank
3. Each step asks the resolver for the next direction and moves one cell
4. The walk stops at the end marker, or at the first structural defect
"""

from typing import Optional, Sequence, Union

from .collector import collect
from .errors import ErrorKind, TraceError
from .glyphs import START, END, is_letter, is_track_glyph
from .grid import Grid, render_path
from .markers import locate
from .models import Direction, PathReport, PathResult, TraversalState
from .resolver import resolve_direction


GridLike = Union[Grid, Sequence[Union[str, Sequence[str]]]]


def max_steps_for(grid: Grid) -> int:
    """Upper bound on steps: each cell can be entered at most once per direction."""
    return 4 * grid.cell_count


def start_state(grid: Grid) -> TraversalState:
    """Validate the markers and return the state at the start cell."""
    start = locate(grid, START)
    locate(grid, END)
    return TraversalState(
        position=start,
        direction=None,
        visited=(start,),
        letters=(),
    )


def advance(grid: Grid, state: TraversalState, direction: Direction) -> TraversalState:
    """Move one cell in `direction`, returning the new state."""
    position = state.position.step(direction)
    glyph = grid.cell(position)

    if not is_track_glyph(glyph):
        raise TraceError(ErrorKind.INVALID_GLYPH, glyph=glyph, position=position)

    letters = state.letters + (position,) if is_letter(glyph) else state.letters
    return TraversalState(
        position=position,
        direction=direction,
        visited=state.visited + (position,),
        letters=letters,
    )


def walk(grid: Grid, max_steps: Optional[int] = None) -> TraversalState:
    """Walk from start to end and return the final state."""
    limit = max_steps if max_steps is not None else max_steps_for(grid)
    state = start_state(grid)

    # Markers first, then the alphabet
    invalid = grid.invalid_cells()
    if invalid:
        raise TraceError(ErrorKind.INVALID_GLYPH, glyph=grid.cell(invalid[0]), position=invalid[0])

    steps = 0
    while grid.cell(state.position) != END:
        if steps >= limit:
            raise TraceError(ErrorKind.BROKEN_PATH, position=state.position)
        direction = resolve_direction(grid, state)
        state = advance(grid, state, direction)
        steps += 1

    return state


def trace(grid: GridLike, max_steps: Optional[int] = None) -> PathResult:
    """
    Trace the track from `@` to `x`.

    Args:
        grid: A Grid, or rows of characters
        max_steps: Optional override of the step bound

    Returns:
        PathResult with the walked glyphs and the collected letters

    Raises:
        TraceError: on any structural defect
    """
    grid = _as_grid(grid)
    state = walk(grid, max_steps)
    return collect(grid, state.visited, state.letters)


def find_path(grid: GridLike, max_steps: Optional[int] = None) -> PathReport:
    """
    Trace a map and report the outcome instead of raising.

    Returns a PathReport with:
    - valid: True if a path from start to end was found
    - path / word: the traversal output (only when valid)
    - steps: number of moves taken
    - error: the defect found (only when invalid)
    - rendered: the walked cells drawn in place (only when valid)
    """
    grid = _as_grid(grid)

    try:
        state = walk(grid, max_steps)
    except TraceError as e:
        return PathReport(valid=False, error=e.to_issue())

    result = collect(grid, state.visited, state.letters)
    return PathReport(
        valid=True,
        path=result.path,
        word=result.word,
        steps=len(state.visited) - 1,
        rendered=render_path(grid, state.visited),
        visited=[tuple(p) for p in state.visited],
    )


def _as_grid(grid: GridLike) -> Grid:
    return grid if isinstance(grid, Grid) else Grid.from_rows(grid)
