"""
Channel selection and component encoding.

A color is serialized in two steps: :class:`ChannelOrder` picks which channels
are emitted and in what sequence, then :class:`ComponentEncoding` turns every
selected 0-255 channel into bytes:

- ``BYTE``: the raw value, one byte
- ``FLOAT``: ``value / 255`` as a little-endian IEEE-754 single (4 bytes)
- ``HALF``: ``value / 255`` as a little-endian IEEE-754 half (2 bytes)

>>> encode_color(Color(255, 0, 0), "bgra", "byte")
b'\\x00\\x00\\xff\\xff'
"""
from typing import Iterable, Sequence, assert_never

import numpy as np
from boundednumbers import clamp01

from ..colors.color import Color
from ..errors import ValidationError
from ..types.color_types import ColorLike
from ..types.format_type import (
    CHANNEL_MAX,
    DEFAULT_ENCODING,
    DEFAULT_ORDER,
    ChannelOrder,
    ComponentEncoding,
    as_channel_order,
    as_encoding,
    component_dtypes,
    component_sizes,
    order_channels,
)
from .numbers import f32_to_half16, half16_to_f32, unit_channel


def encode_components(values: Iterable[int], encoding: ComponentEncoding | str) -> bytes:
    """Encode a sequence of 0-255 channel values with ``encoding``."""
    encoding = as_encoding(encoding)
    values = [int(v) for v in values]
    for v in values:
        if not 0 <= v <= CHANNEL_MAX:
            raise ValidationError(f"Channel value out of range: {v}")

    match encoding:
        case ComponentEncoding.BYTE:
            encoded = values
        case ComponentEncoding.FLOAT:
            encoded = [unit_channel(v) for v in values]
        case ComponentEncoding.HALF:
            encoded = [f32_to_half16(unit_channel(v)) for v in values]
        case _:
            assert_never(encoding)
    return np.array(encoded, dtype=component_dtypes[encoding]).tobytes()


def encode_component(value: int, encoding: ComponentEncoding | str) -> bytes:
    return encode_components((value,), encoding)


def decode_components(data: bytes, encoding: ComponentEncoding | str) -> list[int]:
    """
    Decode bytes produced by :func:`encode_components` back to 0-255 values.

    Float and half components are rounded to the nearest channel value and
    clamped, so values written by other tools still decode to a valid channel.
    """
    encoding = as_encoding(encoding)
    size = component_sizes[encoding]
    if len(data) % size:
        raise ValidationError(
            f"{len(data)} bytes is not a whole number of {encoding.value} components"
        )
    raw = np.frombuffer(data, dtype=component_dtypes[encoding])

    match encoding:
        case ComponentEncoding.BYTE:
            return [int(v) for v in raw]
        case ComponentEncoding.FLOAT:
            units = [float(v) for v in raw]
        case ComponentEncoding.HALF:
            units = [half16_to_f32(int(v)) for v in raw]
        case _:
            assert_never(encoding)
    return [_unit_to_channel(u) for u in units]


def _unit_to_channel(unit: float) -> int:
    if unit != unit:
        raise ValidationError("Cannot decode NaN component")
    return int(round(clamp01(unit) * CHANNEL_MAX))


def encoded_size(order: ChannelOrder | str, encoding: ComponentEncoding | str) -> int:
    """Number of bytes :func:`encode_color` produces for ``order``/``encoding``."""
    return len(order_channels[as_channel_order(order)]) * component_sizes[as_encoding(encoding)]


def encode_color(
    color: ColorLike,
    order: ChannelOrder | str = DEFAULT_ORDER,
    encoding: ComponentEncoding | str = DEFAULT_ENCODING,
) -> bytes:
    """Select ``color``'s channels per ``order`` and encode them per ``encoding``."""
    return encode_components(Color.from_value(color).channels(order), encoding)


def decode_color(
    data: bytes,
    order: ChannelOrder | str = DEFAULT_ORDER,
    encoding: ComponentEncoding | str = DEFAULT_ENCODING,
) -> Color:
    """
    Inverse of :func:`encode_color`.

    Orders without alpha decode with an opaque alpha of 255.
    """
    order = as_channel_order(order)
    expected = encoded_size(order, encoding)
    if len(data) != expected:
        raise ValidationError(f"Expected {expected} bytes for {order.value}, got {len(data)}")
    values = dict(zip(order_channels[order], decode_components(data, encoding)))
    return Color(values["r"], values["g"], values["b"], values.get("a", CHANNEL_MAX))


def halves_to_bytes(units: Sequence[float]) -> bytes:
    """Pack unit floats as consecutive little-endian halves."""
    halves = [f32_to_half16(u) for u in units]
    return np.array(halves, dtype=component_dtypes[ComponentEncoding.HALF]).tobytes()
