"""Tests for document offset services."""

import pytest
from treeview_mcp.parser import Document, Position, Range


SOURCE = "const foo = 1;\nlet foo2 = foo + foo;\r\nbar();"


def test_position_at_start_of_lines():
    """Test offsets map onto zero-based line/character positions."""
    doc = Document(SOURCE)

    assert doc.position_at(0) == Position(0, 0)
    assert doc.position_at(6) == Position(0, 6)
    assert doc.position_at(15) == Position(1, 0)
    assert doc.position_at(len(SOURCE)) == Position(2, 6)


def test_position_at_clamps():
    """Test out-of-range offsets are clamped to the document."""
    doc = Document(SOURCE)

    assert doc.position_at(-5) == Position(0, 0)
    assert doc.position_at(10_000) == Position(2, 6)


def test_offset_at_round_trip():
    """Test offset_at inverts position_at."""
    doc = Document(SOURCE)

    for offset in (0, 6, 15, 20, len(SOURCE)):
        assert doc.offset_at(doc.position_at(offset)) == offset


def test_line_at_strips_line_breaks():
    """Test line text excludes the line break, including CRLF."""
    doc = Document(SOURCE)

    assert doc.line_at(0) == "const foo = 1;"
    assert doc.line_at(1) == "let foo2 = foo + foo;"
    assert doc.line_at(2) == "bar();"
    assert doc.line_count == 3


def test_get_text_range():
    """Test reading text within a range."""
    doc = Document(SOURCE)

    assert doc.get_text() == SOURCE
    assert doc.get_text(Range(Position(0, 6), Position(0, 9))) == "foo"


def test_range_for_unique_identifier():
    """Test a name occurring once on its line gets a tight range."""
    doc = Document(SOURCE)

    result = doc.range_for_identifier("bar", doc.offset_at(Position(2, 0)))

    assert result == Range(Position(2, 0), Position(2, 3))
    assert result.end.character - result.start.character == 3


def test_range_for_repeated_identifier_is_zero_width():
    """Test a name occurring twice collapses to its first occurrence."""
    doc = Document("foo(foo);")

    result = doc.range_for_identifier("foo", 0)

    assert result.is_empty
    assert result.start == Position(0, 0)


def test_range_for_substring_match_counts_as_repeat():
    """Test line search does not respect word boundaries."""
    doc = Document(SOURCE)

    # "foo" appears inside "foo2" and twice more on line 1
    result = doc.range_for_identifier("foo", 15)

    assert result == Range.empty(Position(1, 4))


def test_range_for_missing_identifier():
    """Test a name absent from its line degrades to the offset position."""
    doc = Document(SOURCE)

    result = doc.range_for_identifier("missing", 17)

    assert result == Range.empty(Position(1, 2))


@pytest.mark.parametrize("text,expected", [
    ('"use strict";\nconst a = 1;', True),
    ("'use strict';", True),
    ('\n  "use strict";', True),
    ("const a = 1;", False),
    ('// "use strict"', False),
])
def test_is_strict(text, expected):
    """Test detection of a leading strict directive."""
    assert Document(text).is_strict() is expected


def test_from_path_infers_language(tmp_path):
    """Test reading a document from disk."""
    source_file = tmp_path / "app.js"
    source_file.write_text("var x = 1;\n", encoding="utf-8")

    doc = Document.from_path(str(source_file))

    assert doc.language_id == "javascript"
    assert doc.text == "var x = 1;\n"
    assert doc.uri.startswith("file://")
