"""
Color curves: 64-entry lookup tables interpolated from sparse keyframes.

A curve is stored as ``CURVE_SAMPLES`` colors sampled at ``t = i / 63``, each
color four consecutive halves in R, G, B, A order (512 bytes in total).

Sampling follows the asset format's own evaluation, carried out in single
precision:

1. keyframes are sorted by time (ties keep their input order)
2. for every sample time, the first adjacent pair ``(t1, c1), (t2, c2)`` with
   ``t1 <= t <= t2`` is used; ``u = (t - t1) / (t2 - t1)``, or ``0`` when
   both times are equal
3. every channel is ``(c1 + u * (c2 - c1)) / 255``
4. sample times outside the keyframe span take the nearest boundary color
"""
from __future__ import annotations
import warnings
from collections.abc import Mapping
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..colors.color import Color
from ..conversions.components import halves_to_bytes
from ..conversions.numbers import f32, fits_f32, half16_to_f32
from ..errors import PatchWarning, ValidationError
from ..types.color_types import KeyframeInput
from ..types.format_type import (
    CHANNEL_MAX,
    CURVE_CHANNELS,
    CURVE_SAMPLES,
    ComponentEncoding,
    component_dtypes,
    component_sizes,
)

Keyframe = Tuple[np.float32, Color]

CURVE_BYTES = CURVE_SAMPLES * CURVE_CHANNELS * component_sizes[ComponentEncoding.HALF]


def normalize_keyframes(keyframes: KeyframeInput) -> List[Keyframe]:
    """
    Validate keyframes and return them as ``(float32 time, Color)`` pairs sorted by time.

    Accepts a ``{time: color}`` mapping or an iterable of ``(time, color)``
    pairs; colors may be anything :meth:`Color.from_value` understands.

    Raises:
        ValidationError: fewer than two keyframes, or a time that is not a
            finite single precision value.
    """
    items = keyframes.items() if isinstance(keyframes, Mapping) else keyframes
    frames: List[Keyframe] = []
    for entry in items:
        try:
            time, color = entry
        except (TypeError, ValueError):
            raise ValidationError(f"Keyframe must be a (time, color) pair, got {entry!r}") from None
        if isinstance(time, bool) or not isinstance(time, (int, float, np.floating, np.integer)):
            raise ValidationError(f"Keyframe time must be a number, got {time!r}")
        if not fits_f32(time):
            raise ValidationError(f"Keyframe time must be a finite single precision value, got {time!r}")
        if not 0.0 <= time <= 1.0:
            warnings.warn(
                f"Keyframe time {time} is outside [0, 1]; samples only cover [0, 1]",
                PatchWarning,
                stacklevel=2,
            )
        frames.append((f32(time), Color.from_value(color)))

    if len(frames) < 2:
        raise ValidationError("at least two keyframes required")

    frames.sort(key=lambda frame: frame[0])
    return frames


def sample_times(samples: int = CURVE_SAMPLES) -> List[np.float32]:
    """Sample times ``i / (samples - 1)`` in single precision."""
    if samples < 2:
        raise ValidationError("A curve needs at least two samples")
    last = f32(samples - 1)
    return [f32(i) / last for i in range(samples)]


def find_bracket(times: Sequence[np.float32], t: np.float32) -> Optional[int]:
    """Index ``j`` of the first pair with ``times[j] <= t <= times[j + 1]``, or None."""
    for j in range(len(times) - 1):
        if times[j] <= t <= times[j + 1]:
            return j
    return None


def evaluate(frames: Sequence[Keyframe], t: np.float32) -> np.ndarray:
    """Interpolated unit RGBA at ``t`` for keyframes from :func:`normalize_keyframes`."""
    scale = f32(CHANNEL_MAX)
    j = find_bracket([time for time, _ in frames], t)

    if j is None:
        # Outside the keyframe span: clamp to the closest end
        _, color = frames[0] if t < frames[0][0] else frames[-1]
        return np.array(color.value, dtype=np.float32) / scale

    (t1, c1), (t2, c2) = frames[j], frames[j + 1]
    u = f32(0) if t1 == t2 else (t - t1) / (t2 - t1)
    start = np.array(c1.value, dtype=np.int32)
    delta = np.array(c2.value, dtype=np.int32) - start
    return (start.astype(np.float32) + u * delta.astype(np.float32)) / scale


def sample_curve(keyframes: KeyframeInput, samples: int = CURVE_SAMPLES) -> np.ndarray:
    """
    Evaluate a keyframe set into a lookup table.

    Args:
        keyframes: ``{time: color}`` mapping or ``(time, color)`` pairs, at least two.
        samples: Number of evenly spaced samples over ``[0, 1]``.

    Returns:
        float32 array of shape ``(samples, 4)`` with unit RGBA rows.
    """
    frames = normalize_keyframes(keyframes)
    times = sample_times(samples)
    table = np.empty((samples, CURVE_CHANNELS), dtype=np.float32)
    for i, t in enumerate(times):
        table[i] = evaluate(frames, t)
    return table


def encode_curve(keyframes: KeyframeInput) -> bytes:
    """The 512-byte half-float table for ``keyframes``."""
    return halves_to_bytes(sample_curve(keyframes).ravel())


def decode_curve(data: bytes) -> np.ndarray:
    """Decode a 512-byte curve table back to a ``(64, 4)`` float32 array."""
    if len(data) != CURVE_BYTES:
        raise ValidationError(f"A color curve is {CURVE_BYTES} bytes, got {len(data)}")
    halves = np.frombuffer(data, dtype=component_dtypes[ComponentEncoding.HALF])
    units = np.array([half16_to_f32(int(h)) for h in halves], dtype=np.float32)
    return units.reshape(CURVE_SAMPLES, CURVE_CHANNELS)
