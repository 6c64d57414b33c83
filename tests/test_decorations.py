import typing

import pytest

from _streamtok.decorations import (
    Decorations,
    register_decorations,
    registered_decorations,
    reset_decorations,
)
from _streamtok.positioned_error import PositionedError


@pytest.fixture(autouse=True)
def clean_decorations():
    reset_decorations()
    yield
    reset_decorations()


def test_defaults_are_identity():
    decorations = registered_decorations()
    for name in Decorations.field_names():
        assert getattr(decorations, name)("text") == "text"


def test_registered_decorations_are_used():
    register_decorations(label=lambda s: f"*{s}*")
    err = PositionedError("m", "ab", 1)
    assert err.pretty_print().startswith("*SyntaxError*: m")


def test_registering_keeps_other_decorations():
    register_decorations(label=lambda s: "L")
    decorations = register_decorations(caret=lambda s: "C")
    assert decorations.label("x") == "L"
    assert decorations.caret("x") == "C"
    assert PositionedError("m", "ab", 1).pretty_print() == "L: m\n\n\nab\n C"


def test_own_decorations_take_precedence():
    register_decorations(label=lambda s: "registered")
    err = PositionedError("m", "ab", 1, decorations=Decorations())
    assert err.pretty_print().startswith("SyntaxError: m")


def test_reset_decorations():
    register_decorations(label=lambda s: "L")
    reset_decorations()
    assert PositionedError("m", "ab", 1).pretty_print().startswith("SyntaxError")


def test_unknown_decorated_field():
    with pytest.raises(ValueError, match="Unknown decorated fields"):
        register_decorations(background=str.upper)


def test_decoration_has_to_be_callable():
    with pytest.raises(TypeError):
        register_decorations(label="red")


def test_decorations_are_typed_as_text_functions():
    hints = typing.get_type_hints(Decorations)
    for name in Decorations.field_names():
        assert hints[name] == typing.Callable[[str], str]
