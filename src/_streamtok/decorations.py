"""
Text decorations applied to rendered errors, typically used to add terminal
colors. A decoration is any function from str to str; it wraps a field of the
rendered output without changing its text content.
"""

from dataclasses import dataclass, fields, replace
from typing import Callable


def identity(text):
    return text


@dataclass(frozen=True)
class Decorations:
    """
    One decoration per decorated field of PositionedError.pretty_print.
    """

    path: Callable[[str], str] = identity
    row: Callable[[str], str] = identity
    column: Callable[[str], str] = identity
    label: Callable[[str], str] = identity
    separator: Callable[[str], str] = identity
    message: Callable[[str], str] = identity
    caret: Callable[[str], str] = identity

    @classmethod
    def field_names(cls):
        return tuple(f.name for f in fields(cls))


_registered = Decorations()


def register_decorations(**decorations):
    """
    Set process wide decorations used by errors that were not given
    their own, ie.

    >>> register_decorations(label=lambda s: f"\\x1b[31m{s}\\x1b[0m")

    Fields that are not given keep their currently registered decoration.

    :param decorations: Functions keyed by field name, see Decorations.
    :returns: The newly registered Decorations.
    """
    global _registered
    unknown = set(decorations) - set(Decorations.field_names())
    if unknown:
        raise ValueError(f"Unknown decorated fields: {sorted(unknown)}")
    for name, decoration in decorations.items():
        if not callable(decoration):
            raise TypeError(f"Decoration for {name} has to be callable")
    _registered = replace(_registered, **decorations)
    return _registered


def reset_decorations():
    global _registered
    _registered = Decorations()


def registered_decorations():
    return _registered
