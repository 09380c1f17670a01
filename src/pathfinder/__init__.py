"""Track-map pathfinding for ASCII drawings."""

from .engine import trace, find_path, walk, start_state, advance, max_steps_for
from .models import Direction, Position, TraversalState, PathResult, TraceIssue, PathReport
from .errors import ErrorKind, TraceError
from .grid import Grid, render_path
from .glyphs import GlyphKind, classify, is_letter, is_track_glyph, is_field_value
from .markers import locate, count_glyph
from .resolver import resolve_direction, neighbor_candidates
from .collector import collect
from .parsing import parse_map, load_map, extract_map_content, check_cells
from .messages import format_issue
from .data import list_samples, get_sample

__all__ = [
    # Main traversal
    "trace",
    "find_path",
    "walk",
    "start_state",
    "advance",
    "max_steps_for",
    # Models
    "Direction",
    "Position",
    "TraversalState",
    "PathResult",
    "TraceIssue",
    "PathReport",
    # Errors
    "ErrorKind",
    "TraceError",
    # Grid and glyphs
    "Grid",
    "render_path",
    "GlyphKind",
    "classify",
    "is_letter",
    "is_track_glyph",
    "is_field_value",
    # Steps
    "locate",
    "count_glyph",
    "resolve_direction",
    "neighbor_candidates",
    "collect",
    # Loading and presentation
    "parse_map",
    "load_map",
    "extract_map_content",
    "check_cells",
    "format_issue",
    # Samples
    "list_samples",
    "get_sample",
]
