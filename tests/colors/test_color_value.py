import math

import pytest

from chromapatch.colors.color import Color
from chromapatch.errors import ValidationError
from chromapatch.types.format_type import ChannelOrder


def test_color_defaults_to_opaque():
    assert Color(1, 2, 3).value == (1, 2, 3, 255)
    assert Color(1, 2, 3, 4).a == 4


def test_color_is_immutable():
    color = Color(10, 20, 30)
    with pytest.raises(AttributeError):
        color.r = 5
    with pytest.raises(AttributeError):
        color._value = (0, 0, 0, 0)
    with pytest.raises(AttributeError):
        color.name = "red"
    assert not hasattr(color, "__dict__")
    assert color.value == (10, 20, 30, 255)


def test_color_accepts_whole_floats():
    assert Color(255.0, 0.0, 12.0).value == (255, 0, 12, 255)


@pytest.mark.parametrize("channels", [
    (300, 0, 0),
    (0, -5, 0),
    (0, 0, 256),
    (0, 0, 0, 10 ** 400),
    (12.9, 0, 0),
    (0, 0, 0, 254.5),
])
def test_color_rejects_out_of_range_and_fractional_channels(channels):
    with pytest.raises(ValidationError):
        Color(*channels)


def test_color_rejects_non_numbers():
    with pytest.raises(ValidationError):
        Color("10", 0, 0)
    with pytest.raises(ValidationError):
        Color(True, 0, 0)
    with pytest.raises(ValidationError):
        Color(math.nan, 0, 0)
    with pytest.raises(ValidationError):
        Color(math.inf, 0, 0)


def test_channels_follow_order():
    color = Color(1, 2, 3, 4)
    assert color.channels(ChannelOrder.RGBA) == (1, 2, 3, 4)
    assert color.channels(ChannelOrder.ARGB) == (4, 1, 2, 3)
    assert color.channels(ChannelOrder.BGRA) == (3, 2, 1, 4)
    assert color.channels(ChannelOrder.RGB) == (1, 2, 3)
    assert color.channels("bgr") == (3, 2, 1)


def test_hex_parsing():
    assert Color.from_hex("#99254C") == Color(0x99, 0x25, 0x4C, 0xFF)
    assert Color.from_hex("f2267480") == Color(0xF2, 0x26, 0x74, 0x80)
    assert Color(0x99, 0x25, 0x4C).to_hex() == "#99254CFF"
    assert Color(0x99, 0x25, 0x4C).to_hex(include_alpha=False) == "#99254C"


@pytest.mark.parametrize("text", ["#FFF", "#GGGGGG", "", "#1234567"])
def test_bad_hex_is_rejected(text):
    with pytest.raises(ValidationError):
        Color.from_hex(text)


def test_from_value():
    color = Color(1, 2, 3, 4)
    assert Color.from_value(color) is color
    assert Color.from_value((1, 2, 3, 4)) == color
    assert Color.from_value([1, 2, 3]) == Color(1, 2, 3, 255)
    assert Color.from_value("#01020304") == color
    with pytest.raises(ValidationError):
        Color.from_value((1, 2))
    with pytest.raises(ValidationError):
        Color.from_value(7)


def test_equality_and_hash():
    assert Color(1, 2, 3) == Color(1, 2, 3, 255)
    assert Color(1, 2, 3) != Color(1, 2, 3, 0)
    assert len({Color(1, 2, 3), Color(1, 2, 3, 255), Color(3, 2, 1)}) == 2
    assert Color(1, 2, 3) != (1, 2, 3, 255)


def test_unit_values_and_iteration():
    color = Color(255, 0, 51, 255)
    assert color.unit_values == (1.0, 0.0, 0.2, 1.0)
    assert list(color) == [255, 0, 51, 255]
    r, g, b, a = color
    assert (r, g, b, a) == (255, 0, 51, 255)


def test_with_alpha_returns_new_color():
    color = Color(1, 2, 3)
    transparent = color.with_alpha(0)
    assert transparent == Color(1, 2, 3, 0)
    assert color.a == 255


def test_repr():
    assert repr(Color(1, 2, 3, 4)) == "Color(1, 2, 3, 4)"
