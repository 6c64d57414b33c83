import pytest

import streamtok
from streamtok.version import version as streamtok_version


def test_exports():
    for name in streamtok.__all__:
        assert hasattr(streamtok, name)


def test_version():
    assert streamtok.__version__ == streamtok_version


def test_parse_json_through_public_api():
    with pytest.raises(streamtok.PositionedError) as excinfo:
        streamtok.parse_json('{"a": tru}', path="x.json")
    assert streamtok.is_positioned_error(excinfo.value)
    assert excinfo.value.pretty_print().startswith("x.json:1:6 - SyntaxError")
