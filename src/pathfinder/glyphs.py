"""Glyph alphabet and classification predicates."""

import string
from enum import Enum
from typing import Optional


HORIZONTAL = '-'
VERTICAL = '|'
TURN = '+'
START = '@'
END = 'x'

LETTERS = frozenset(string.ascii_uppercase)
TRACK_GLYPHS = LETTERS | {HORIZONTAL, VERTICAL, TURN, START, END}


class GlyphKind(Enum):
    BLANK = "blank"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    TURN = "turn"
    START = "start"
    END = "end"
    LETTER = "letter"
    INVALID = "invalid"


_KINDS = {
    HORIZONTAL: GlyphKind.HORIZONTAL,
    VERTICAL: GlyphKind.VERTICAL,
    TURN: GlyphKind.TURN,
    START: GlyphKind.START,
    END: GlyphKind.END,
}


def classify(glyph: Optional[str]) -> GlyphKind:
    """Map a raw cell value to its glyph kind. Anything unrecognised is INVALID."""
    if glyph is None:
        return GlyphKind.INVALID
    if glyph in _KINDS:
        return _KINDS[glyph]
    if glyph in LETTERS:
        return GlyphKind.LETTER
    if len(glyph) == 1 and glyph.isspace():
        return GlyphKind.BLANK
    return GlyphKind.INVALID


def is_letter(glyph: Optional[str]) -> bool:
    return glyph in LETTERS


def is_track_glyph(glyph: Optional[str]) -> bool:
    return glyph in TRACK_GLYPHS


def is_field_value(glyph: Optional[str]) -> bool:
    """True for anything allowed in a raw map cell: a track glyph or a blank."""
    return classify(glyph) is not GlyphKind.INVALID
