"""
In this module, a tokenizer is an object owning an in-memory sequence of
values which it takes from the front, one at a time, and turns into tokens.

Implementing classes of StreamTokenizer define on_next_value, which is called
by StreamTokenizer.tokenize for every value taken from the front of the input.
on_next_value may take further values itself, either one at a time
(take_next/take_one) or as runs of values for which a predicate holds
(consume/consume_seeded, see Consumer). This allows nested structures to be
tokenized by plain recursion.

The value that ends a run, the orphan, is either appended to the run,
discarded or put back at the front of the input, see OrphanBehavior.

StringTokenizer specializes StreamTokenizer for text and creates
PositionedErrors pointing into the text.
"""

from .combinators import Consumer
from .orphan_behavior import OrphanBehavior
from .stream_tokenizer import DEFAULT_MAX_DEPTH, StreamTokenizer
from .string_tokenizer import StringTokenizer
from .token import Token

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "Consumer",
    "OrphanBehavior",
    "StreamTokenizer",
    "StringTokenizer",
    "Token",
]
