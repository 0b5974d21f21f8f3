from __future__ import annotations
from numbers import Integral, Real
from typing import Iterator, Tuple

from ..errors import ValidationError
from ..types.color_types import ChannelTuple, ColorLike
from ..types.format_type import CHANNEL_MAX, ChannelOrder, as_channel_order, order_channels


def _channel(name: str, value) -> int:
    """Validate a single channel: a whole number in ``[0, 255]``."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationError(f"Channel {name} must be a number, got {value!r}")
    if not isinstance(value, Integral) and not float(value).is_integer():
        raise ValidationError(f"Channel {name} must be a whole number, got {value!r}")
    if not 0 <= value <= CHANNEL_MAX:
        raise ValidationError(f"Channel {name} must be in [0, {CHANNEL_MAX}], got {value!r}")
    return int(value)


class Color:
    """
    An immutable 8-bit RGBA color.

    Channels are ints in ``[0, 255]``; out of range or fractional values
    raise :class:`ValidationError`.

    >>> Color(255, 128, 0).value
    (255, 128, 0, 255)
    >>> Color.from_hex("#FF800080").channels("bgra")
    (0, 128, 255, 128)
    """
    __slots__ = ('_value', '_is_frozen')  # no __dict__, so no new attributes

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, r: int, g: int, b: int, a: int = CHANNEL_MAX) -> None:
        self._value: ChannelTuple = (
            _channel("r", r),
            _channel("g", g),
            _channel("b", b),
            _channel("a", a),
        )
        super().__setattr__('_is_frozen', True)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_hex(cls, text: str) -> Color:
        """Parse ``#RRGGBB`` or ``#RRGGBBAA`` (the ``#`` is optional)."""
        digits = text.strip().lstrip("#")
        if len(digits) not in (6, 8):
            raise ValidationError(f"Hex color must have 6 or 8 digits, got {text!r}")
        try:
            channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
        except ValueError:
            raise ValidationError(f"Invalid hex color: {text!r}") from None
        return cls(*channels)

    @classmethod
    def from_value(cls, value: ColorLike) -> Color:
        """Build a Color from a Color, an RGB/RGBA tuple or a hex string."""
        if isinstance(value, Color):
            return value
        if isinstance(value, str):
            return cls.from_hex(value)
        try:
            channels = tuple(value)
        except TypeError:
            raise ValidationError(f"Cannot interpret {value!r} as a color") from None
        if len(channels) not in (3, 4):
            raise ValidationError(f"Color expects 3 or 4 channels, got {len(channels)}")
        return cls(*channels)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ChannelTuple:
        return self._value

    @property
    def r(self) -> int:
        return self._value[0]

    @property
    def g(self) -> int:
        return self._value[1]

    @property
    def b(self) -> int:
        return self._value[2]

    @property
    def a(self) -> int:
        return self._value[3]

    @property
    def unit_values(self) -> Tuple[float, ...]:
        """Channels scaled to ``[0, 1]``."""
        return tuple(v / CHANNEL_MAX for v in self._value)

    def channels(self, order: ChannelOrder | str) -> ChannelTuple:
        """Return the channel values selected and arranged by ``order``."""
        names = order_channels[as_channel_order(order)]
        return tuple(getattr(self, name) for name in names)

    def with_alpha(self, alpha: int) -> Color:
        return Color(self.r, self.g, self.b, alpha)

    def to_hex(self, include_alpha: bool = True) -> str:
        values = self._value if include_alpha else self._value[:3]
        return "#" + "".join(f"{v:02X}" for v in values)

    # ------------------ DUNDERS ------------------
    def __iter__(self) -> Iterator[int]:
        return iter(self._value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Color):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"Color{self._value!r}"
