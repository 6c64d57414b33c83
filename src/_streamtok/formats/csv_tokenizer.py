from _streamtok.tokenizer.orphan_behavior import OrphanBehavior
from _streamtok.tokenizer.string_tokenizer import StringTokenizer

DELIMITERS = ",\t"
LINE_ENDINGS = "\r\n"


class CsvTokenizer(StringTokenizer):
    """
    Tokenizes comma or tab separated values into lines, a list of rows which
    are lists of cell values. The structure of csv is simple enough that no
    tokens are produced, rows are assembled directly.

    Cells may be quoted with '"' in which case they can contain delimiters
    and newlines, a quote inside a quoted cell is written as '""'.
    """

    def __init__(self, raw, path=None, **kwargs):
        super().__init__(raw, path, **kwargs)
        self.lines = [[]]
        self.line_index = 0
        self.column_index = 0

    def tokenize(self):
        super().tokenize()
        if self.column_index > 0:
            self._fill_empty_cell()
        return self

    def on_next_value(self, char):
        if char in DELIMITERS:
            self._fill_empty_cell()
            self.column_index += 1
        elif char == "\n":
            if self.column_index > 0:
                self._fill_empty_cell()
            self.line_index += 1
            self.column_index = 0
            self.lines.append([])
        elif char == "\r":
            pass
        elif char == '"':
            self._set_cell(self.consume_quoted_value())
        else:
            self._set_cell(self.consume_value(char))

    def _row(self):
        row = self.lines[self.line_index]
        while len(row) <= self.column_index:
            row.append("")
        return row

    def _fill_empty_cell(self):
        self._row()

    def _set_cell(self, value):
        self._row()[self.column_index] += value

    def consume_value(self, char):
        """
        Consumes characters until a delimiter or line ending.

        :param char: The first character of the value.
        """
        return "".join(
            self.consume_seeded(char).until(
                lambda c: c in DELIMITERS or c in LINE_ENDINGS
            )
        )

    def consume_quoted_value(self):
        """
        Consumes characters until the closing quote, which is dropped. The
        opening quote is expected to be taken already.
        """
        start = self.offset
        value = []
        while True:
            if self.exhausted:
                raise self.error("Unterminated quoted value", start)
            chars = self.consume(OrphanBehavior.CONSUME).until(lambda c: c == '"')
            if chars[-1] != '"':
                raise self.error("Unterminated quoted value", start)
            value.extend(chars[:-1])
            if self.peek() != '"':
                return "".join(value)
            # Escaped quote
            value.append(self.take_one())


def parse_csv(text, headers=True, path=None):
    """
    Parse csv text into a list of dictionaries, one per row.

    :param text: The csv contents.
    :param headers: Whether the first row contains the column names. If
        False, the column index (as a string) is used as key.
    :param path: Optional name of the source used in errors.
    :returns: List of rows as dicts from column name to cell value, missing
        cells are "".
    """
    lines = CsvTokenizer(text, path).tokenize().lines
    if lines and not lines[-1]:
        lines.pop()
    if not lines:
        return []

    if headers:
        header_row = lines.pop(0)
    else:
        header_row = [str(i) for i in range(len(lines[0]))]

    return [
        {key: row[i] if i < len(row) else "" for i, key in enumerate(header_row)}
        for row in lines
    ]
