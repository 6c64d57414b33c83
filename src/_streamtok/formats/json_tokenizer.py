from dataclasses import dataclass
from enum import Enum, auto, unique
from typing import Optional

from _streamtok.errors import EndOfInput, NestingTooDeepError
from _streamtok.tokenizer.orphan_behavior import OrphanBehavior
from _streamtok.tokenizer.string_tokenizer import StringTokenizer
from _streamtok.tokenizer.token import Token

LITERALS = {"true": True, "false": False, "null": None}


@unique
class JsonKind(Enum):
    OBJECT = auto()
    ARRAY = auto()
    STRING = auto()
    NUMBER = auto()
    LITERAL = auto()


@dataclass
class JsonToken(Token):
    """
    A json value. For JsonKind.OBJECT and JsonKind.ARRAY the value is the
    list of child tokens, members of objects carry their key.
    """

    kind: Optional[JsonKind] = None
    key: Optional[str] = None


class JsonTokenizer(StringTokenizer):
    """
    Tokenizes json text into one JsonToken per root object or array,
    with nested values as children.

    Strings do not support escapes and numbers are non-negative integers.
    """

    def on_next_value(self, char):
        offset = self.offset
        if char.isspace() or char == ",":
            return
        if char in "{[":
            self.tokens.append(self._consume_value(char))
            return
        raise self.error(f'Expected "[" or "{{", received {char}', offset)

    def _consume_value(self, char, key=None):
        offset = self.offset
        if char == "{":
            with self.descend():
                value = self._consume_members()
            kind = JsonKind.OBJECT
        elif char == "[":
            with self.descend():
                value = self._consume_elements()
            kind = JsonKind.ARRAY
        elif char == '"':
            value = self._consume_string()
            kind = JsonKind.STRING
        elif char.isdecimal():
            value = int(self.consume_number(char))
            kind = JsonKind.NUMBER
        elif char.isalpha():
            value = self._consume_literal(char)
            kind = JsonKind.LITERAL
        else:
            raise self.error(f'Unexpected char encountered "{char}"', offset)
        return JsonToken(value, self.position, kind=kind, key=key)

    def _consume_members(self):
        members = []
        while True:
            char = self.take_one('Expected "}" before end of input.')
            offset = self.offset
            if char == "}":
                return members
            if char.isspace() or char == ",":
                continue
            if char != '"':
                raise self.error(f'Expected a key/value pair. Received "{char}"', offset)
            key = self._consume_string()
            if self.consume_whitespace() != ":":
                raise self.error("Invalid key/value pair encountered.", offset)
            members.append(self._consume_value(self.consume_whitespace(), key=key))

    def _consume_elements(self):
        elements = []
        while True:
            char = self.take_one('Expected "]" before end of input.')
            if char == "]":
                return elements
            if char.isspace() or char == ",":
                continue
            elements.append(self._consume_value(char))

    def _consume_string(self):
        """
        Consumes a string, the opening quote is expected to be taken already.
        """
        start = self.offset
        if self.exhausted:
            raise self.error("Unterminated string", start)
        chars = self.consume(OrphanBehavior.CONSUME).until(lambda c: c == '"')
        if chars[-1] != '"':
            raise self.error("Unterminated string", start)
        return "".join(chars[:-1])

    def _consume_literal(self, char):
        offset = self.offset
        word = self.consume_word(char)
        if word not in LITERALS:
            raise self.error(
                f"Expected true, false or null, received {word}", offset
            )
        return LITERALS[word]


def as_python(token):
    """
    :returns: The python value (dict, list, str, int, bool or None) of
        the given JsonToken.
    """
    if token.kind == JsonKind.OBJECT:
        return {member.key: as_python(member) for member in token.value}
    if token.kind == JsonKind.ARRAY:
        return [as_python(element) for element in token.value]
    return token.value


def parse_json(text, path=None, **kwargs):
    """
    Parse json text containing a single root object or array.

    :param text: The json contents.
    :param path: Optional name of the source used in errors.
    :param kwargs: Passed on to JsonTokenizer, eg. max_depth.
    :raises PositionedError: If text is not valid json, use
        PositionedError.pretty_print to show where.
    :returns: The corresponding python value.
    """
    tokenizer = JsonTokenizer(text, path, **kwargs)
    try:
        tokens = tokenizer.tokenize().tokens
    except EndOfInput as err:
        raise tokenizer.error(str(err), len(text)) from err
    except NestingTooDeepError as err:
        raise tokenizer.error(str(err)) from err

    if not tokens:
        raise tokenizer.error("JSON document must have a root object or array.", 0)
    if len(tokens) > 1:
        raise tokenizer.error(
            "Unexpected data after the root object or array.", tokens[0].position
        )
    return as_python(tokens[0])
