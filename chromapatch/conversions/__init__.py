"""
Chromapatch Component Conversions
=================================

Bit-exact serialization of 0-255 color channels.

numbers
    ``f32_to_half16`` / ``half16_to_f32``: IEEE-754 binary16 at the bit level,
    plus single precision helpers.
components
    Channel selection by :class:`ChannelOrder` and per-channel encoding by
    :class:`ComponentEncoding` (byte, float32, half16).
"""
from .numbers import f32, f32_bits, f32_to_half16, fits_f32, half16_to_f32, unit_channel
from .components import (
    decode_color,
    decode_components,
    encode_color,
    encode_component,
    encode_components,
    encoded_size,
    halves_to_bytes,
)
from ..types.format_type import ChannelOrder, ComponentEncoding

__all__ = [
    "f32",
    "f32_bits",
    "f32_to_half16",
    "fits_f32",
    "half16_to_f32",
    "unit_channel",
    "decode_color",
    "decode_components",
    "encode_color",
    "encode_component",
    "encode_components",
    "encoded_size",
    "halves_to_bytes",
    "ChannelOrder",
    "ComponentEncoding",
]
