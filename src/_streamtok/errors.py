class TokenizationError(Exception):
    """
    Base class for every error raised while tokenizing a stream of values.
    """

    pass


class EndOfInput(TokenizationError):
    """
    Raised by a tokenizer when the input buffer runs out before a request
    for more values could be satisfied.
    """

    def __init__(self, message=None, position=None):
        """
        :param message: Description of what was expected, defaults to
            "Unexpected end of input."
        :param position: The position of the tokenizer at the time the
            input ran out.
        """
        super().__init__(message or "Unexpected end of input.")
        self.position = position


class SyntaxFault(TokenizationError):
    """
    Raised by concrete tokenizers when the input does not have the
    expected shape. The tokenizer engine itself never raises it.
    """

    def __init__(self, message, offset):
        super().__init__(message)
        self._message = message
        self._offset = offset

    @property
    def message(self):
        return self._message

    @property
    def offset(self):
        return self._offset


class NestingTooDeepError(TokenizationError):
    """
    Raised when nested structures descend further than the
    max_depth the tokenizer was configured with.
    """

    pass
