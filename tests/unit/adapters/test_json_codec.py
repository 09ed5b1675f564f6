"""Unit tests for the JSON encode/decode helpers."""

import json
import math
from dataclasses import dataclass

import pytest

from selectra.adapters.json_codec import decode, encode
from selectra.config import JsonSettings
from selectra.domain.errors import ParseError, SerializationError
from selectra.domain.shapes import Circle, Rectangle

# pylint: disable=magic-value-comparison, too-few-public-methods


class Template:
    """Plain (non-dataclass) template whose methods decoded objects gain."""

    def __init__(self) -> None:
        raise AssertionError("decode must not call __init__")

    def area(self) -> float:
        """Area of a square of side ``self.side``."""
        return self.side**2  # pylint: disable=no-member


# ============================================================================
#                               encode
# ============================================================================


@pytest.mark.parametrize(
    "value, expected",
    [
        ([1, 2, 3], "[1,2,3]"),
        ({"width": 10, "height": 20}, '{"width":10,"height":20}'),
        ((1, "a"), '[1,"a"]'),
        ("text", '"text"'),
        (None, "null"),
        (True, "true"),
        (1.5, "1.5"),
    ],
)
def test_encode_structured_values(value, expected):
    """Plain structured values encode compactly in insertion order."""
    assert encode(value) == expected


def test_encode_dataclass_drops_methods():
    """Dataclass instances encode as their fields only."""
    assert encode(Rectangle(10, 20)) == '{"width":10,"height":20}'
    assert encode({"shapes": [Circle(1)]}) == '{"shapes":[{"radius":1}]}'


def test_encode_with_settings():
    """Indent and key sorting follow the given settings."""
    text = encode({"b": 1, "a": 2}, JsonSettings(indent=2, sort_keys=True))
    assert text == '{\n  "a": 2,\n  "b": 1\n}'


def test_encode_reads_environment(monkeypatch):
    """Without explicit settings the environment is consulted."""
    monkeypatch.setenv("SELECTRA_JSON_SORT_KEYS", "true")
    assert encode({"b": 1, "a": 2}) == '{"a":2,"b":1}'


def test_encode_cyclic_structure():
    """Cyclic containers raise SerializationError."""
    cyclic: list = []
    cyclic.append(cyclic)
    with pytest.raises(SerializationError) as excinfo:
        encode(cyclic)
    assert isinstance(excinfo.value.__cause__, ValueError)


def test_encode_cyclic_dataclass():
    """A dataclass that refers to itself is cyclic too."""
    r = Rectangle(1, 2)
    r.width = r
    with pytest.raises(SerializationError):
        encode(r)


@pytest.mark.parametrize(
    "value",
    [
        {"fn": lambda: None},
        {1, 2},
        object(),
        {"area": Rectangle(1, 2).area},
        math.nan,
        [math.inf],
    ],
)
def test_encode_non_serializable(value):
    """Functions, sets, arbitrary objects and non-finite floats are rejected."""
    with pytest.raises(SerializationError):
        encode(value)


# ============================================================================
#                               decode
# ============================================================================


def test_decode_dataclass_template():
    """A dataclass template is built from the record."""
    r = decode(Rectangle, '{"width":10,"height":20}')
    assert r == Rectangle(10, 20)
    assert r.area() == 200


def test_decode_accepts_bytes():
    """Byte input is parsed like text."""
    assert decode(Circle, b'{"radius": 1}').area() == pytest.approx(math.pi)


def test_decode_plain_template():
    """A plain class template gets its attributes from the record."""
    obj = decode(Template, '{"side": 3, "label": "x"}')
    assert isinstance(obj, Template)
    assert obj.area() == 9
    assert vars(obj) == {"side": 3, "label": "x"}


def test_decode_template_changes_are_visible():
    """Methods resolve through the template, so later additions show up."""

    class Point:
        """Template extended after decoding."""

    obj = decode(Point, '{"x": 1, "y": 2}')
    Point.norm1 = lambda self: abs(self.x) + abs(self.y)
    assert obj.norm1() == 3


@pytest.mark.parametrize("text", ["", "{", '{"width": }', "not json", "{'a': 1}"])
def test_decode_malformed(text):
    """Malformed text raises ParseError chained to the JSON error."""
    with pytest.raises(ParseError) as excinfo:
        decode(Rectangle, text)
    assert isinstance(excinfo.value.__cause__, json.JSONDecodeError)


@pytest.mark.parametrize("text", ["[1,2,3]", "42", '"s"', "null"])
def test_decode_requires_object(text):
    """Only JSON objects can carry a template."""
    with pytest.raises(ParseError, match="Expected a JSON object"):
        decode(Template, text)


def test_decode_missing_required_field():
    """A record lacking a dataclass field raises ParseError."""
    with pytest.raises(ParseError, match="Missing required field 'height'"):
        decode(Rectangle, '{"width": 1}')


def test_decode_nested_dataclass():
    """Nested records become nested dataclasses."""

    @dataclass
    class Frame:
        name: str
        outline: Rectangle

    frame = decode(Frame, '{"name":"a","outline":{"width":2,"height":3}}')
    assert frame.outline.area() == 6


@pytest.mark.parametrize(
    "text",
    [b'{"width":1,"height":\xff}', "[" * 100_000 + "]" * 100_000],
    ids=["invalid-utf8", "too-deep"],
)
def test_decode_undecodable(text):
    """Undecodable bytes and runaway nesting raise ParseError too."""
    with pytest.raises(ParseError, match="Malformed JSON") as excinfo:
        decode(Rectangle, text)
    assert isinstance(excinfo.value.__cause__, (UnicodeDecodeError, RecursionError))


class Slotted:
    """Template without an instance ``__dict__``."""

    __slots__ = ("x",)


@pytest.mark.parametrize(
    "template, text",
    [(Slotted, '{"x": 1, "y": 2}'), (dict, '{"x": 1}')],
    ids=["slots", "builtin"],
)
def test_decode_template_refuses_attributes(template, text):
    """Templates that cannot hold the record's attributes raise ParseError."""
    with pytest.raises(ParseError, match="Cannot load attributes"):
        decode(template, text)


def test_decode_slotted_template_with_known_fields():
    """Slotted templates accept records restricted to their slots."""
    obj = decode(Slotted, '{"x": 1}')
    assert obj.x == 1


def test_decode_dataclass_rejects_value():
    """Values refused by the dataclass itself raise ParseError."""

    @dataclass
    class Positive:
        size: float

        def __post_init__(self) -> None:
            if self.size <= 0:
                raise ValueError("size must be positive")

    with pytest.raises(ParseError, match="size must be positive") as excinfo:
        decode(Positive, '{"size": -1}')
    assert isinstance(excinfo.value.__cause__, ValueError)
