from enum import Enum, auto, unique


@unique
class OrphanBehavior(Enum):
    """
    What happens to the orphan, the value that made a Consumer.while_ or
    Consumer.until loop stop:

    CONSUME appends it to the consumed values, DISCARD drops it and PUT_BACK
    returns it to the front of the input so it is taken again next.
    """

    CONSUME = auto()
    DISCARD = auto()
    PUT_BACK = auto()

    @classmethod
    def coerce(cls, value):
        """
        :param value: An OrphanBehavior or the name of one, eg. "discard".
        :returns: The corresponding OrphanBehavior.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.upper()]
            except KeyError:
                pass
        raise ValueError(
            f"orphan behavior has to be one of {[b.name for b in cls]}, got {value!r}"
        )
