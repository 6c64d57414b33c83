import pytest
from hypothesis import given

from _streamtok.decorations import Decorations
from _streamtok.errors import SyntaxFault, TokenizationError
from _streamtok.positioned_error import PositionedError, is_positioned_error

from .generators.value_streams import source_text

multiline = "line one\nline two\nline three"


def test_caret_keeps_tabs():
    raw = "ab\tcd\nef"
    err = PositionedError("bad", raw, raw.index("c"))
    assert err.pretty_print() == "SyntaxError: bad\n\n\nab\tcd\n  \t^\nef"


def test_pretty_print_with_path():
    err = PositionedError("Unexpected two", multiline, multiline.index("two"), "in.txt")
    assert err.pretty_print() == (
        "in.txt:2:5 - SyntaxError: Unexpected two\n"
        "\n"
        "line one\n"
        "line two\n"
        "     ^\n"
        "line three"
    )


def test_row_and_column():
    err = PositionedError("", multiline, multiline.index("three"))
    assert (err.row, err.column) == (3, 5)
    assert PositionedError("", multiline, 0).row == 1


def test_pretty_print_at_end_of_source():
    err = PositionedError("Unexpected end", "abc", 3, "f")
    assert err.pretty_print() == "f:1:3 - SyntaxError: Unexpected end\n\n\nabc\n   ^"


def test_blank_lines_after_are_dropped():
    err = PositionedError("m", "abc\n  \n", 1)
    assert err.pretty_print() == "SyntaxError: m\n\n\nabc\n ^"


def test_str_is_message():
    err = PositionedError("plain", "abc", 1)
    assert str(err) == "plain"
    assert err.message == "plain"
    assert isinstance(err, SyntaxFault)
    assert isinstance(err, TokenizationError)


def test_fork():
    err = PositionedError("first", multiline, 2, "f.txt")
    forked = err.fork("other", 5)

    assert (forked.message, forked.offset) == ("other", 5)
    assert forked.raw is err.raw
    assert forked.path == err.path
    assert (err.message, err.offset) == ("first", 2)


def test_fork_keeps_offset():
    err = PositionedError("first", multiline, 2)
    assert err.fork("other").offset == 2


def test_is_immutable():
    err = PositionedError("first", multiline, 2)
    with pytest.raises(AttributeError):
        err.offset = 3
    with pytest.raises(AttributeError):
        err.raw = ""


@pytest.mark.parametrize(
    "raw, offset",
    [("abc", 10), ("abc", -1), (None, 0)],
)
def test_pretty_print_degrades_to_message(raw, offset):
    err = PositionedError("only the message", raw, offset, "f.txt")
    with pytest.warns(RuntimeWarning, match="Could not format error"):
        assert err.pretty_print() == "only the message"


def test_decorations():
    decorations = Decorations(
        path=lambda s: f"({s})",
        row=lambda s: f"<{s}>",
        column=lambda s: f"[{s}]",
        label=lambda s: s.upper(),
        separator=lambda s: "|",
        message=lambda s: f"'{s}'",
        caret=lambda s: "*",
    )
    err = PositionedError("m", "ab", 1, "p", decorations=decorations)
    assert err.pretty_print() == "(p):<1>:[1] - SYNTAXERROR|'m'\n\n\nab\n *"


def test_forked_errors_keep_decorations():
    decorations = Decorations(label=lambda s: "E")
    err = PositionedError("m", "ab", 1, decorations=decorations)
    assert err.fork("n").pretty_print().startswith("E: n")


def test_failing_decoration_degrades_to_message():
    def fail(text):
        raise RuntimeError("no colors")

    err = PositionedError("m", "ab", 1, decorations=Decorations(caret=fail))
    with pytest.warns(RuntimeWarning):
        assert err.pretty_print() == "m"


@pytest.mark.parametrize(
    "value, expected",
    [
        (PositionedError("m", "", 0), True),
        (SyntaxFault("m", 0), False),
        (ValueError("m"), False),
        ("m", False),
        (None, False),
    ],
)
def test_is_positioned_error(value, expected):
    assert is_positioned_error(value) is expected


@given(source_text())
def test_pretty_print_locates_offset(text_and_offset):
    text, offset = text_and_offset
    err = PositionedError("m", text, offset, "f")
    header, excerpt = err.pretty_print().split("\n\n", 1)

    assert header == f"f:{err.row}:{err.column} - SyntaxError: m"
    assert err.row == text[:offset].count("\n") + 1
    lines = excerpt.split("\n")
    # The first line has an empty line above it, where preceding lines would be
    fault_index = max(err.row - 1, 1)
    caret_line = lines[fault_index + 1]
    assert caret_line.endswith("^")
    assert len(caret_line) == err.column + 1
    assert lines[fault_index] == text.split("\n")[err.row - 1]
