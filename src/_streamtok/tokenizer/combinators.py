from _streamtok.tokenizer.orphan_behavior import OrphanBehavior

_MISSING = object()


class Consumer:
    """
    Consumes values from the front of a StreamTokenizer while, or until, a
    predicate holds. The value that ends the loop, the orphan, is handled
    according to orphan_behavior.

    Consumers are created with StreamTokenizer.consume and
    StreamTokenizer.consume_seeded and are meant to be used once. The seed is
    only returned by the first while_ or until, ie.

    >>> word = tokenizer.consume_seeded(char).while_(str.isalpha)

    """

    def __init__(self, tokenizer, seed=_MISSING, orphan_behavior=None):
        """
        :param tokenizer: The StreamTokenizer to take values from.
        :param seed: A value already taken by the caller which starts the
            consumed sequence. When no seed is given, the first value is
            taken from the tokenizer and raises EndOfInput if there is none.
        :param orphan_behavior: What to do with the orphan, defaults to
            OrphanBehavior.PUT_BACK.
        """
        self._tokenizer = tokenizer
        self._seed = seed
        self.orphan_behavior = (
            OrphanBehavior.PUT_BACK if orphan_behavior is None else orphan_behavior
        )

    @property
    def orphan_behavior(self):
        return self._orphan_behavior

    @orphan_behavior.setter
    def orphan_behavior(self, value):
        self._orphan_behavior = OrphanBehavior.coerce(value)

    @property
    def is_seeded(self):
        return self._seed is not _MISSING

    def while_(self, predicate):
        """
        :param predicate: Function from value to bool.
        :returns: List of consumed values, up to but not including the first
            value for which predicate is false (unless the orphan behavior is
            OrphanBehavior.CONSUME).
        """
        return self._consume(lambda value: not predicate(value))

    def until(self, predicate):
        """
        :param predicate: Function from value to bool.
        :returns: List of consumed values, up to but not including the first
            value for which predicate is true (unless the orphan behavior is
            OrphanBehavior.CONSUME).
        """
        return self._consume(predicate)

    def _consume(self, stops):
        tokenizer = self._tokenizer
        consumed = []
        if self.is_seeded:
            consumed.append(self._seed)
            self._seed = _MISSING
            current = tokenizer.take_one() if tokenizer.remaining else _MISSING
        else:
            current = tokenizer.take_one()

        while current is not _MISSING and not stops(current):
            consumed.append(current)
            current = tokenizer.take_one() if tokenizer.remaining else _MISSING

        if current is not _MISSING:
            self._handle_orphan(current, consumed)
        return consumed

    def _handle_orphan(self, orphan, consumed):
        if self.orphan_behavior == OrphanBehavior.CONSUME:
            consumed.append(orphan)
        elif self.orphan_behavior == OrphanBehavior.PUT_BACK:
            self._tokenizer.put_back(orphan)
