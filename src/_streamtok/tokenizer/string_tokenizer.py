import re

from _streamtok.positioned_error import PositionedError
from _streamtok.tokenizer.stream_tokenizer import StreamTokenizer


def compile_pattern(pattern, flags=0):
    if isinstance(pattern, re.Pattern):
        return pattern
    if isinstance(pattern, str):
        return re.compile(pattern, flags)
    raise TypeError(f"Expected a regular expression, got {type(pattern).__name__}")


class StringTokenizer(StreamTokenizer):
    """
    A StreamTokenizer over the characters of a string, with helpers for
    whitespace, words and numbers and for raising errors that point into
    the string.
    """

    def __init__(self, raw, path=None, **kwargs):
        """
        :param raw: The text to tokenize.
        :param path: Optional name of the source of raw, used in errors.
        """
        super().__init__(raw, **kwargs)
        self._base_error = PositionedError("", raw, 0, path)
        self.whitespace_pattern = r"\s"
        self.word_pattern = re.compile(r"[a-z]", re.IGNORECASE)
        self.number_pattern = r"\d"

    @property
    def raw(self):
        return self._base_error.raw

    @property
    def path(self):
        return self._base_error.path

    @property
    def whitespace_pattern(self):
        return self._whitespace_pattern

    @whitespace_pattern.setter
    def whitespace_pattern(self, value):
        self._whitespace_pattern = compile_pattern(value)

    @property
    def word_pattern(self):
        return self._word_pattern

    @word_pattern.setter
    def word_pattern(self, value):
        self._word_pattern = compile_pattern(value)

    @property
    def number_pattern(self):
        return self._number_pattern

    @number_pattern.setter
    def number_pattern(self, value):
        self._number_pattern = compile_pattern(value)

    @property
    def offset(self):
        """
        Index into raw of the character taken last, -1 before any
        character was taken.
        """
        return self.position - 1

    def consume_whitespace(self):
        """
        Take characters until one that is not whitespace.

        :returns: The first non-whitespace character.
        """
        is_space = self._whitespace_pattern.search
        char = self.take_one()
        while is_space(char):
            char = self.take_one()
        return char

    def consume_word(self, first_char):
        is_word = self._word_pattern.search
        return "".join(
            self.consume_seeded(first_char).while_(lambda c: is_word(c) is not None)
        )

    def consume_number(self, first_char):
        is_number = self._number_pattern.search
        return "".join(
            self.consume_seeded(first_char).while_(lambda c: is_number(c) is not None)
        )

    def error(self, message, offset=None):
        """
        :returns: A PositionedError pointing into raw at offset, defaults
            to the character taken last.
        """
        return self._base_error.fork(
            message, max(self.offset, 0) if offset is None else offset
        )
