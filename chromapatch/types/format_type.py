from enum import Enum
import numpy as np

from ..errors import ValidationError


class ChannelOrder(str, Enum):
    RGBA = "rgba"
    ARGB = "argb"
    BGRA = "bgra"
    RGB = "rgb"
    BGR = "bgr"


class ComponentEncoding(str, Enum):
    BYTE = "byte"
    FLOAT = "float"
    HALF = "half"


order_channels = {
    ChannelOrder.RGBA: ("r", "g", "b", "a"),
    ChannelOrder.ARGB: ("a", "r", "g", "b"),
    ChannelOrder.BGRA: ("b", "g", "r", "a"),
    ChannelOrder.RGB: ("r", "g", "b"),
    ChannelOrder.BGR: ("b", "g", "r"),
}

component_sizes = {
    ComponentEncoding.BYTE: 1,
    ComponentEncoding.FLOAT: 4,
    ComponentEncoding.HALF: 2,
}

# Components are serialized little-endian regardless of host
component_dtypes = {
    ComponentEncoding.BYTE: np.dtype("u1"),
    ComponentEncoding.FLOAT: np.dtype("<f4"),
    ComponentEncoding.HALF: np.dtype("<u2"),
}

DEFAULT_ORDER = ChannelOrder.RGBA
DEFAULT_ENCODING = ComponentEncoding.BYTE

CURVE_SAMPLES = 64
CURVE_CHANNELS = 4

# Blueprint colors store each channel at a fixed distance from the blue byte
SPLIT_COLOR_ORDER = ChannelOrder.BGRA
SPLIT_COLOR_DELTAS = {
    "b": 0x00,
    "g": 0x35,
    "r": 0x6A,
    "a": 0x9F,
}

CHANNEL_MAX = 255


def as_channel_order(order: ChannelOrder | str) -> ChannelOrder:
    """Coerce ``order`` to a :class:`ChannelOrder`, accepting names like ``"bgra"``."""
    if isinstance(order, ChannelOrder):
        return order
    try:
        return ChannelOrder(str(order).lower())
    except ValueError:
        raise ValidationError(f"Unknown channel order: {order!r}") from None


def as_encoding(encoding: ComponentEncoding | str) -> ComponentEncoding:
    """Coerce ``encoding`` to a :class:`ComponentEncoding`."""
    if isinstance(encoding, ComponentEncoding):
        return encoding
    try:
        return ComponentEncoding(str(encoding).lower())
    except ValueError:
        raise ValidationError(f"Unknown component encoding: {encoding!r}") from None
