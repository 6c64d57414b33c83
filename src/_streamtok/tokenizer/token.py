from dataclasses import dataclass
from typing import Any


@dataclass
class Token:
    """
    A token produced by a tokenizer.

    :param value: Whatever the tokenizer assembled from the input values.
    :param position: The number of input values consumed when the token
        was finalized, not an offset into any raw text.
    """

    value: Any
    position: int
