"""User-facing rendering of trace issues."""

from .errors import ErrorKind
from .models import TraceIssue


_PREFIX = "ERROR! Glitch"

MESSAGES = {
    ErrorKind.MISSING_START: "missing start glyph",
    ErrorKind.MISSING_END: "missing end glyph",
    ErrorKind.MISSING_UNIQUE_GLYPH: "missing glyph",
    ErrorKind.MULTIPLE_START: "multiple start glyphs",
    ErrorKind.MULTIPLE_END: "multiple end glyphs",
    ErrorKind.MULTIPLE_UNIQUE_GLYPH: "multiple glyphs",
    ErrorKind.MISPLACED_START: "misplaced start glyph",
    ErrorKind.INVALID_GLYPH: "invalid glyph",
    ErrorKind.FORK: "fork",
    ErrorKind.FAKE_TURN: "fake turn",
    ErrorKind.BROKEN_PATH: "broken path",
}


def format_issue(issue: TraceIssue) -> str:
    """
    Render an issue as a one-line message.

    Example:
        >>> format_issue(TraceIssue(code="MULTIPLE_START", glyph="@", count=2))
        'ERROR! Glitch (multiple start glyphs) in the matrix! Should have just 1 start glyph, but it has 2!'
    """
    kind = ErrorKind(issue.code)
    message = f"{_PREFIX} ({MESSAGES[kind]}) in the matrix!"

    if kind is ErrorKind.MULTIPLE_START:
        message += f" Should have just 1 start glyph, but it has {issue.count}!"
    elif kind is ErrorKind.MULTIPLE_END:
        message += f" Should have just 1 end glyph, but it has {issue.count}!"
    elif kind is ErrorKind.MULTIPLE_UNIQUE_GLYPH:
        message += f" Should have just 1 '{issue.glyph}' glyph, but it has {issue.count}!"
    elif kind is ErrorKind.MISSING_UNIQUE_GLYPH:
        message += f" You have been looking for '{issue.glyph}'!"
    elif kind is ErrorKind.MISPLACED_START:
        message += " Should be placed on either end of the path!"
    elif kind is ErrorKind.INVALID_GLYPH and issue.glyph is not None:
        message += f" Found {issue.glyph!r}."

    if issue.row is not None and issue.column is not None:
        message += f" (row {issue.row}, column {issue.column})"

    return message
