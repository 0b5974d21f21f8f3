"""
In-place binary patching of asset files.

Every writer opens the target without truncating it, seeks to the requested
offset, writes, and closes the handle on every exit path. Arguments are
validated before the file is opened, so a :class:`ValidationError` never
leaves a partially patched file behind. I/O failures are not caught: they
reach the caller as ``OSError`` (``FileNotFoundError``, ``PermissionError``,
...). There is no locking, retry or rollback; callers writing to the same file
from several threads must serialize the calls themselves.

Writing at the current end of file appends. Writing past it is allowed on
filesystems that support it (POSIX, NTFS): the gap reads back as zero bytes
and a :class:`PatchWarning` is emitted. Filesystems that refuse raise
``OSError``.

Example
-------
>>> from chromapatch import Color, write_color, write_color_curve
>>> write_color("BP_MailDraw.uasset", 0x24076, Color(0, 255, 0), order="bgra")
>>> write_color_curve("CA_UI_SaveLoad.uasset", 0x4A6, {
...     0.0: Color(0x99, 0x25, 0x4C),
...     0.4: Color(0xCC, 0x19, 0x61),
...     1.0: Color(0xF2, 0x26, 0x74),
... })
"""
from __future__ import annotations
import math
import os
import warnings
from contextlib import contextmanager
from numbers import Integral, Real
from typing import BinaryIO, Iterable, Iterator, Literal, Optional, Tuple

import numpy as np

from .colors.color import Color
from .conversions.components import decode_color, encode_color, encoded_size
from .conversions.numbers import fits_f32
from .errors import PatchWarning, ValidationError
from .gradients.curve import CURVE_BYTES, decode_curve, encode_curve
from .types.color_types import ColorLike, KeyframeInput, PathLike
from .types.format_type import (
    CHANNEL_MAX,
    DEFAULT_ENCODING,
    DEFAULT_ORDER,
    SPLIT_COLOR_DELTAS,
    SPLIT_COLOR_ORDER,
    ChannelOrder,
    ComponentEncoding,
    as_channel_order,
    as_encoding,
    order_channels,
)
from .utils.default import value_or_default

Target = Tuple[int, ChannelOrder | str] | Tuple[int, ChannelOrder | str, ComponentEncoding | str]

MAX_OFFSET = 2 ** 63 - 1


def _check_offset(offset) -> int:
    if isinstance(offset, bool) or not isinstance(offset, Integral):
        raise ValidationError(f"Offset must be an integer, got {offset!r}")
    if offset < 0:
        raise ValidationError(f"Offset must be non-negative, got {offset}")
    if offset > MAX_OFFSET:
        raise ValidationError(f"Offset must fit in a signed 64-bit integer, got {offset:#x}")
    return int(offset)


@contextmanager
def open_patch(
    path: PathLike,
    offset: int,
    mode: Literal["r+b", "rb"] = "r+b",
) -> Iterator[BinaryIO]:
    """
    Open ``path`` without truncating it and position the handle at ``offset``.

    The file must already exist. The handle is closed when the block exits,
    whether it raised or not.
    """
    offset = _check_offset(offset)
    with open(path, mode) as stream:
        if mode != "rb":
            size = os.fstat(stream.fileno()).st_size
            if offset > size:
                warnings.warn(
                    f"Offset {offset:#x} is past the end of {os.fspath(path)!r} "
                    f"({size:#x} bytes); the gap will be zero-filled",
                    PatchWarning,
                    stacklevel=3,
                )
        stream.seek(offset)
        yield stream


def write_bytes(path: PathLike, offset: int, data: bytes) -> None:
    """Overwrite ``len(data)`` bytes of ``path`` starting at ``offset``."""
    with open_patch(path, offset) as stream:
        stream.write(data)


def write_color(
    path: PathLike,
    offset: int,
    color: ColorLike,
    order: Optional[ChannelOrder | str] = None,
    encoding: Optional[ComponentEncoding | str] = None,
) -> None:
    """
    Write a single color at ``offset``.

    Args:
        path: Existing file to patch.
        offset: Byte offset of the first component.
        color: :class:`Color`, RGB(A) tuple or hex string.
        order: Channels and their sequence, RGBA by default.
        encoding: Component encoding, BYTE by default.
    """
    order = value_or_default(order, DEFAULT_ORDER)
    encoding = value_or_default(encoding, DEFAULT_ENCODING)
    write_bytes(path, offset, encode_color(color, order, encoding))


def write_color_curve(path: PathLike, offset: int, keyframes: KeyframeInput) -> None:
    """
    Write a 64-sample half-float color curve (512 bytes) at ``offset``.

    Raises:
        ValidationError: fewer than two keyframes. Nothing is written.
    """
    write_bytes(path, offset, encode_curve(keyframes))


def write_byte(path: PathLike, offset: int, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, Integral) or not 0 <= value <= CHANNEL_MAX:
        raise ValidationError(f"Byte value must be an int in [0, 255], got {value!r}")
    write_bytes(path, offset, bytes((int(value),)))


def write_float(path: PathLike, offset: int, value: float) -> None:
    """
    Write ``value`` as a 4-byte single in the host's native byte order.

    Infinities and NaN are written as such; finite values beyond the single
    precision range raise :class:`ValidationError` instead of becoming infinity.
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationError(f"Float value must be a number, got {value!r}")
    try:
        as_float = float(value)
    except OverflowError:
        raise ValidationError(f"Float value out of single precision range: {value!r}") from None
    if math.isfinite(as_float) and not fits_f32(as_float):
        raise ValidationError(f"Float value out of single precision range: {value!r}")
    write_bytes(path, offset, np.float32(as_float).tobytes())


def write_blueprint_split_color(
    path: PathLike,
    offset: int,
    color: ColorLike,
    order: Optional[ChannelOrder | str] = None,
) -> None:
    """
    Write a color whose channels are stored apart from each other.

    Blueprint assets keep the blue byte at ``offset`` and green, red and
    alpha at fixed distances after it (``+0x35``, ``+0x6A``, ``+0x9F``).
    Alpha is only written for BGRA.

    Raises:
        ValidationError: ``order`` is neither BGR nor BGRA.
    """
    order = as_channel_order(value_or_default(order, SPLIT_COLOR_ORDER))
    if order not in (ChannelOrder.BGR, ChannelOrder.BGRA):
        raise ValidationError(f"unsupported order for split color: {order.value}")
    color = Color.from_value(color)
    offset = _check_offset(offset)
    _check_offset(offset + max(SPLIT_COLOR_DELTAS.values()))

    with open_patch(path, offset) as stream:
        for channel in order_channels[order]:
            stream.seek(offset + SPLIT_COLOR_DELTAS[channel])
            stream.write(bytes((getattr(color, channel),)))


def _check_target(target: Target) -> Tuple[int, ChannelOrder, ComponentEncoding]:
    try:
        size = len(target)
    except TypeError:
        raise ValidationError(f"Target must be (offset, order[, encoding]), got {target!r}") from None
    if size == 2:
        offset, order = target
        encoding = DEFAULT_ENCODING
    elif size == 3:
        offset, order, encoding = target
    else:
        raise ValidationError(f"Target must be (offset, order[, encoding]), got {target!r}")
    return _check_offset(offset), as_channel_order(order), as_encoding(encoding)


def write_colors(path: PathLike, color: ColorLike, targets: Iterable[Target]) -> None:
    """
    Write the same color at several places in one file.

    ``targets`` holds ``(offset, order)`` or ``(offset, order, encoding)``
    tuples. All targets are validated before the file is opened; the writes
    then happen in the given sequence through a single handle.
    """
    color = Color.from_value(color)
    patches = []
    for target in targets:
        offset, order, encoding = _check_target(target)
        patches.append((offset, encode_color(color, order, encoding)))
    if not patches:
        return

    first_offset, first_data = patches[0]
    with open_patch(path, first_offset) as stream:
        stream.write(first_data)
        for offset, data in patches[1:]:
            stream.seek(offset)
            stream.write(data)


def read_bytes(path: PathLike, offset: int, size: int) -> bytes:
    """Read exactly ``size`` bytes at ``offset``."""
    with open_patch(path, offset, mode="rb") as stream:
        data = stream.read(size)
    if len(data) != size:
        raise ValidationError(
            f"Expected {size} bytes at {offset:#x}, file only has {len(data)} left"
        )
    return data


def read_color(
    path: PathLike,
    offset: int,
    order: Optional[ChannelOrder | str] = None,
    encoding: Optional[ComponentEncoding | str] = None,
) -> Color:
    """Read back a color written by :func:`write_color`."""
    order = value_or_default(order, DEFAULT_ORDER)
    encoding = value_or_default(encoding, DEFAULT_ENCODING)
    data = read_bytes(path, offset, encoded_size(order, encoding))
    return decode_color(data, order, encoding)


def read_color_curve(path: PathLike, offset: int) -> np.ndarray:
    """Read back a curve written by :func:`write_color_curve` as a ``(64, 4)`` array."""
    return decode_curve(read_bytes(path, offset, CURVE_BYTES))
