"""
Errors that point at an exact offset in the source text they were raised
for, and can render the offending line with a caret underneath it:

    data.json:2:9 - SyntaxError: Expected true, false or null, received nul

    {
      "a": nul
           ^
    }

"""

import warnings

from _streamtok.decorations import registered_decorations
from _streamtok.errors import SyntaxFault

LABEL = "SyntaxError"
SEPARATOR = ": "
CARET = "^"


def is_positioned_error(value):
    """
    :returns: True if value is an exception carrying the source text and
        offset needed to render it.
    """
    return (
        isinstance(value, BaseException)
        and hasattr(value, "raw")
        and hasattr(value, "offset")
    )


class PositionedError(SyntaxFault):
    """
    A syntax error anchored at an absolute offset into raw, the entire
    source text. Instances are immutable, use fork to derive errors for
    other offsets in the same source.
    """

    def __init__(self, message, raw, offset, path=None, decorations=None):
        """
        :param message: Description of the error.
        :param raw: The complete source text the offset points into.
        :param offset: Index into raw where the error occurred.
        :param path: Optional name of the source, eg. a filename.
        :param decorations: Decorations used by pretty_print, defaults to
            the registered decorations at the time of printing.
        """
        super().__init__(message, offset)
        self._raw = raw
        self._path = path
        self._decorations = decorations

    @property
    def raw(self):
        return self._raw

    @property
    def path(self):
        return self._path

    @property
    def row(self):
        """One-based line number of the offset."""
        return self._raw.count("\n", 0, self.offset) + 1

    @property
    def column(self):
        """Zero-based column of the offset within its line."""
        return self.offset - (self._raw.rfind("\n", 0, self.offset) + 1)

    def fork(self, message, offset=None):
        """
        :param message: The message of the new error.
        :param offset: The offset of the new error, defaults to the offset
            of this error.
        :returns: A new PositionedError that shares raw and path with this
            error.
        """
        return PositionedError(
            message,
            self._raw,
            self.offset if offset is None else offset,
            self._path,
            decorations=self._decorations,
        )

    def pretty_print(self):
        """
        :returns: The error header, followed by a blank line and an excerpt of
            the source with a caret under the offset. If the excerpt can not be
            built, only the plain message is returned.
        """
        decorations = self._decorations or registered_decorations()
        try:
            row, column, excerpt = self._highlight(decorations)
            header = (
                decorations.label(LABEL)
                + decorations.separator(SEPARATOR)
                + decorations.message(self.message)
            )
            if self._path:
                header = (
                    f"{decorations.path(self._path)}"
                    f":{decorations.row(str(row))}"
                    f":{decorations.column(str(column))} - {header}"
                )
        except Exception as err:
            warnings.warn(
                f"Could not format error at offset {self.offset}: {err}",
                RuntimeWarning,
                stacklevel=2,
            )
            return self.message
        return header + "\n\n" + excerpt

    def _highlight(self, decorations):
        raw = self._raw
        offset = self.offset
        if not isinstance(raw, str):
            raise TypeError(f"Expected source text, got {type(raw).__name__}")
        if not 0 <= offset <= len(raw):
            raise ValueError(f"Offset outside of source of length {len(raw)}")

        before = raw[:offset]
        after = raw[offset:]

        before_break = before.rfind("\n")
        after_break = after.find("\n")

        line_start = before[before_break + 1 :]
        if after_break < 0:
            line_end = after
            after = ""
        else:
            line_end = after[:after_break]
            after = after[after_break + 1 :]

        row = before.count("\n") + 1
        column = len(line_start)
        before = before[:before_break] if before_break >= 0 else ""

        # Whitespace is copied so tabs line up with the source line
        caret = "".join(c if c.isspace() else " " for c in line_start)
        caret += decorations.caret(CARET)

        excerpt = before + "\n" + line_start + line_end + "\n" + caret
        if after.strip():
            excerpt += "\n" + after

        return row, column, excerpt
