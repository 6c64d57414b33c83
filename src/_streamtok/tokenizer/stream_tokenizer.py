from abc import ABC, abstractmethod
from collections import deque
from contextlib import contextmanager

from _streamtok.errors import EndOfInput, NestingTooDeepError
from _streamtok.tokenizer.combinators import Consumer

DEFAULT_MAX_DEPTH = 100


class StreamTokenizer(ABC):
    """
    A tokenizer over an in-memory sequence of values (characters, tokens
    from an earlier pass, or any other records).

    tokenize() takes values from the front of the input one at a time and
    hands each to on_next_value, which implementing classes define. The hook
    may take further values with take_next, take_one, consume and
    consume_seeded, and appends whatever tokens it assembles to tokens.

    Errors raised by on_next_value propagate out of tokenize unchanged, and
    the input is left as it was at the point of failure.
    """

    def __init__(self, values, max_depth=DEFAULT_MAX_DEPTH):
        """
        :param values: Any finite sequence of values, the tokenizer takes
            ownership of the values for its lifetime.
        :param max_depth: How deep descend() may be nested before
            NestingTooDeepError is raised.
        """
        self._values = deque(values)
        self._length = len(self._values)
        self._depth = 0
        self._observers = []
        self.max_depth = max_depth
        self.tokens = []

    @abstractmethod
    def on_next_value(self, value):
        """
        Called by tokenize for every value taken from the front of the input,
        in input order.
        """
        pass

    @property
    def length(self):
        """The number of values the tokenizer was created with."""
        return self._length

    @property
    def remaining(self):
        return len(self._values)

    @property
    def exhausted(self):
        return not self._values

    @property
    def position(self):
        """
        The number of values consumed from the input so far.
        """
        return self._length - len(self._values)

    @property
    def max_depth(self):
        return self._max_depth

    @max_depth.setter
    def max_depth(self, value):
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise ValueError(f"max_depth has to be a positive integer, got {value!r}")
        self._max_depth = value

    @property
    def depth(self):
        return self._depth

    def __iter__(self):
        return iter(self.tokenize().tokens)

    def tokenize(self):
        """
        Tokenize all of the input.

        :returns: This tokenizer, with the input exhausted.
        """
        values = self._values
        while values:
            value = values.popleft()
            self.on_next_value(value)
            for observer in list(self._observers):
                observer(value)
        return self

    def observe(self, callback):
        """
        Register callback to be called with every value handed to
        on_next_value, after on_next_value has returned.
        """
        self._observers.append(callback)

    def unobserve(self, callback):
        self._observers.remove(callback)

    def take_next(self, count=1, message=None):
        """
        Take count values from the front of the input, discarding all but
        the last.

        :param count: The number of values to take.
        :param message: The message of the EndOfInput raised if the input
            runs out.
        :returns: The count'th value.
        """
        if count < 1:
            raise ValueError(f"count has to be at least 1, got {count}")
        values = self._values
        for _ in range(count):
            if not values:
                raise EndOfInput(message, self.position)
            value = values.popleft()
        return value

    def take_one(self, message=None):
        return self.take_next(1, message)

    def put_back(self, value):
        """
        Return value to the front of the input, the next value taken
        will be value.
        """
        self._values.appendleft(value)

    def peek(self, lookahead=0, default=None):
        """
        :returns: The value lookahead places from the front of the input
            without taking it, or default if the input is too short.
        """
        if 0 <= lookahead < len(self._values):
            return self._values[lookahead]
        return default

    def consume(self, orphan_behavior=None):
        """
        :returns: A Consumer which starts by taking the next value of the
            input. Note that the Consumer raises EndOfInput if the input
            is already exhausted.
        """
        return Consumer(self, orphan_behavior=orphan_behavior)

    def consume_seeded(self, seed, orphan_behavior=None):
        """
        :param seed: A value the caller already took which starts the
            consumed values.
        :returns: A Consumer that starts with seed.
        """
        return Consumer(self, seed=seed, orphan_behavior=orphan_behavior)

    @contextmanager
    def descend(self):
        """
        Context manager to wrap around tokenizing a nested structure,
        raises NestingTooDeepError when nested deeper than max_depth.
        """
        if self._depth >= self._max_depth:
            raise NestingTooDeepError(
                f"Nesting deeper than {self._max_depth} at position {self.position}"
            )
        self._depth += 1
        try:
            yield self._depth
        finally:
            self._depth -= 1
