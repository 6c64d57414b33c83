import streamtok.version
from _streamtok.decorations import (
    Decorations,
    register_decorations,
    reset_decorations,
)
from _streamtok.errors import (
    EndOfInput,
    NestingTooDeepError,
    SyntaxFault,
    TokenizationError,
)
from _streamtok.formats import parse_csv, parse_json
from _streamtok.positioned_error import PositionedError, is_positioned_error
from _streamtok.tokenizer import (
    Consumer,
    OrphanBehavior,
    StreamTokenizer,
    StringTokenizer,
    Token,
)

__version__ = streamtok.version.version

__all__ = [
    "Consumer",
    "Decorations",
    "EndOfInput",
    "NestingTooDeepError",
    "OrphanBehavior",
    "PositionedError",
    "StreamTokenizer",
    "StringTokenizer",
    "SyntaxFault",
    "Token",
    "TokenizationError",
    "is_positioned_error",
    "parse_csv",
    "parse_json",
    "register_decorations",
    "reset_decorations",
]
