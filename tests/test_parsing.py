"""Test map loading and user-facing messages."""

import pytest

from src.pathfinder import (
    ErrorKind,
    Grid,
    TraceIssue,
    check_cells,
    extract_map_content,
    find_path,
    format_issue,
    load_map,
    parse_map,
)


class TestParseMap:
    """Test parsing text drawings into grids."""

    def test_plain_text(self):
        grid, errors = parse_map("@-A\n  |\nx-+")
        assert errors == []
        assert grid.rows == (("@", "-", "A"), (" ", " ", "|"), ("x", "-", "+"))

    def test_map_tags(self):
        text = "Here is my map:\n<map>\n@-x\n</map>\nThanks"
        assert extract_map_content(text) == "\n@-x\n"
        grid, errors = parse_map(text)
        assert errors == []
        assert grid.rows == (("@", "-", "x"),)

    def test_leading_whitespace_kept(self):
        grid, _ = parse_map("  @\n  |\n  x")
        assert grid.rows[0] == (" ", " ", "@")

    def test_surrounding_blank_lines_dropped(self):
        grid, _ = parse_map("\n\n@-x\n   \n")
        assert grid.height == 1

    def test_inner_blank_lines_kept(self):
        grid, _ = parse_map("@-+\n\n  x")
        assert grid.height == 3
        assert grid.rows[1] == ()

    def test_windows_line_endings(self):
        grid, errors = parse_map("@-+\r\n  |\r\n  x\r\n")
        assert errors == []
        assert grid.rows[0] == ("@", "-", "+")

    def test_invalid_cells_reported(self):
        grid, errors = parse_map("@-ß-x\n  #")
        assert [(e.glyph, e.row, e.column) for e in errors] == [("ß", 0, 2), ("#", 1, 2)]
        assert all(e.code == ErrorKind.INVALID_GLYPH.value for e in errors)

    def test_check_cells(self):
        errors = check_cells(Grid.from_rows([" +-ß-+", "@-x"]))
        assert len(errors) == 1
        assert errors[0].code == "INVALID_GLYPH"
        assert (errors[0].glyph, errors[0].row, errors[0].column) == ("ß", 0, 3)
        assert check_cells(Grid.from_rows(["@-x"])) == []

    def test_parsed_map_traces(self):
        grid, _ = parse_map("""
<map>
@---A---+
        |
x-B-+   C
    |   |
    +---+
</map>
""")
        report = find_path(grid)
        assert report.valid is True
        assert report.word == "ACB"

    def test_empty_text(self):
        grid, errors = parse_map("")
        assert errors == []
        assert grid.rows == ()


class TestLoadMap:
    """Test reading maps from files."""

    def test_load_file(self, tmp_path):
        path = tmp_path / "map.txt"
        path.write_text("@-B-x\n", encoding="utf-8")
        grid, errors = load_map(path)
        assert errors == []
        assert grid.rows == (("@", "-", "B", "-", "x"),)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_map(tmp_path / "nope.txt")


class TestFormatIssue:
    """Test rendering issues as messages."""

    def test_missing_start(self):
        issue = TraceIssue(code="MISSING_START", glyph="@")
        assert format_issue(issue) == "ERROR! Glitch (missing start glyph) in the matrix!"

    def test_multiple_start(self):
        issue = TraceIssue(code="MULTIPLE_START", glyph="@", count=2)
        assert format_issue(issue) == (
            "ERROR! Glitch (multiple start glyphs) in the matrix! "
            "Should have just 1 start glyph, but it has 2!"
        )

    def test_multiple_end(self):
        issue = TraceIssue(code="MULTIPLE_END", glyph="x", count=3)
        assert format_issue(issue).endswith("Should have just 1 end glyph, but it has 3!")

    def test_misplaced_start(self):
        issue = TraceIssue(code="MISPLACED_START", glyph="@", row=0, column=4)
        assert format_issue(issue) == (
            "ERROR! Glitch (misplaced start glyph) in the matrix! "
            "Should be placed on either end of the path! (row 0, column 4)"
        )

    def test_fake_turn_with_position(self):
        issue = TraceIssue(code="FAKE_TURN", glyph="+", row=0, column=4)
        assert format_issue(issue) == "ERROR! Glitch (fake turn) in the matrix! (row 0, column 4)"

    def test_invalid_glyph(self):
        issue = TraceIssue(code="INVALID_GLYPH", glyph="#", row=1, column=2)
        assert "Found '#'." in format_issue(issue)

    @pytest.mark.parametrize("kind", list(ErrorKind))
    def test_every_kind_has_a_message(self, kind):
        message = format_issue(TraceIssue(code=kind.value, glyph="A", count=2))
        assert message.startswith("ERROR! Glitch (")

    def test_unknown_code(self):
        with pytest.raises(ValueError):
            format_issue(TraceIssue(code="NOT_A_KIND"))
