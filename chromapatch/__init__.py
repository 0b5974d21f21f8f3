"""
Chromapatch - Byte-exact color patching for binary assets
=========================================================

Overwrites byte ranges of existing asset files with encoded color data: single
colors in any supported channel order and component encoding, 64-sample
half-float color curves interpolated from keyframes, channel-split blueprint
colors, and raw byte/float scalars.

Quick Start
-----------
>>> from chromapatch import Color, write_color, write_color_curve
>>>
>>> # BGRA bytes at 0x24076
>>> write_color(path, 0x24076, Color(0x00, 0xFF, 0x00), order="bgra")
>>>
>>> # Same color as little-endian halves
>>> write_color(path, 0x100, "#00FF00", order="rgba", encoding="half")
>>>
>>> # 512-byte curve table
>>> write_color_curve(path, 0x4A6, {0.0: "#99254C", 0.4: "#CC1961", 1.0: "#F22674"})

Modules
-------
- colors: the immutable Color value type
- conversions: half-float bit conversion and component encoding
- gradients: keyframe curves
- patcher: file writers and readers
"""
from .colors.color import Color
from .conversions import (
    decode_color,
    encode_color,
    encoded_size,
    f32_to_half16,
    half16_to_f32,
)
from .errors import PatchWarning, ValidationError
from .gradients.curve import decode_curve, encode_curve, sample_curve
from .patcher import (
    open_patch,
    read_bytes,
    read_color,
    read_color_curve,
    write_blueprint_split_color,
    write_byte,
    write_bytes,
    write_color,
    write_color_curve,
    write_colors,
    write_float,
)
from .types.format_type import ChannelOrder, ComponentEncoding

__version__ = "1.0.0"

__all__ = [
    # Color
    "Color",
    "ChannelOrder",
    "ComponentEncoding",

    # Encoding
    "encode_color",
    "decode_color",
    "encoded_size",
    "f32_to_half16",
    "half16_to_f32",

    # Curves
    "sample_curve",
    "encode_curve",
    "decode_curve",

    # File patching
    "open_patch",
    "write_bytes",
    "write_color",
    "write_color_curve",
    "write_byte",
    "write_float",
    "write_blueprint_split_color",
    "write_colors",
    "read_bytes",
    "read_color",
    "read_color_curve",

    # Errors
    "ValidationError",
    "PatchWarning",

    # Version
    "__version__",
]
