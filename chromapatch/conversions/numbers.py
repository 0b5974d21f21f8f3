"""
IEEE-754 helpers for component encoding.

Half precision is converted at the bit level: the single precision pattern is
split into sign, exponent and mantissa and re-packed into binary16 with
round-to-nearest-even, so the result does not depend on the platform having a
native half type.
"""
import math

import numpy as np

from ..types.format_type import CHANNEL_MAX

HALF_EXP_MASK = 0x7C00
HALF_QUIET_NAN = 0x0200
HALF_INF = HALF_EXP_MASK
F32_MAX = float(np.finfo(np.float32).max)


def f32(value) -> np.float32:
    """Round ``value`` to single precision."""
    return np.float32(value)


def fits_f32(value) -> bool:
    """True when ``value`` is finite and within the single precision range."""
    try:
        as_float = float(value)
    except OverflowError:
        return False
    return math.isfinite(as_float) and abs(as_float) <= F32_MAX


def f32_bits(value) -> int:
    """Raw 32-bit pattern of ``value`` rounded to single precision."""
    return int(np.float32(value).view(np.uint32))


def unit_channel(value: int) -> np.float32:
    """``value / 255`` computed in single precision."""
    return np.float32(value) / np.float32(CHANNEL_MAX)


def f32_to_half16(value) -> int:
    """
    Convert a float to its IEEE-754 binary16 bit pattern.

    ``value`` is first rounded to single precision, then to half precision
    with round-to-nearest-even. Values too large for a half become infinity,
    values too small become (signed) zero, NaN stays a quiet NaN.

    Args:
        value: Any real number.

    Returns:
        The 16-bit pattern as an int in ``[0, 0xFFFF]``.
    """
    bits = f32_bits(value)
    sign = (bits >> 16) & 0x8000
    exponent = (bits >> 23) & 0xFF
    mantissa = bits & 0x7FFFFF

    if exponent == 0xFF:
        if mantissa:
            return sign | HALF_INF | HALF_QUIET_NAN | (mantissa >> 13)
        return sign | HALF_INF

    half_exponent = exponent - 127 + 15
    if half_exponent >= 0x1F:
        return sign | HALF_INF

    if half_exponent <= 0:
        # Subnormal half (or zero): shift the full significand into place
        if half_exponent < -10:
            return sign
        significand = mantissa | 0x800000
        shift = 14 - half_exponent
        half_mantissa = significand >> shift
        remainder = significand & ((1 << shift) - 1)
        halfway = 1 << (shift - 1)
        if remainder > halfway or (remainder == halfway and half_mantissa & 1):
            half_mantissa += 1
        return sign | half_mantissa

    half = sign | (half_exponent << 10) | (mantissa >> 13)
    remainder = mantissa & 0x1FFF
    if remainder > 0x1000 or (remainder == 0x1000 and half & 1):
        # A carry out of the mantissa bumps the exponent, up to infinity
        half += 1
    return half


def half16_to_f32(bits: int) -> float:
    """
    Convert an IEEE-754 binary16 bit pattern back to a float.

    Every half value is exactly representable, so the result is exact.
    """
    if not 0 <= bits <= 0xFFFF:
        raise ValueError(f"Half bit pattern out of range: {bits:#x}")
    sign = -1.0 if bits & 0x8000 else 1.0
    exponent = (bits >> 10) & 0x1F
    mantissa = bits & 0x3FF

    if exponent == 0x1F:
        return math.copysign(math.inf, sign) if mantissa == 0 else math.nan
    if exponent == 0:
        return math.copysign(math.ldexp(mantissa, -24), sign)
    return math.copysign(math.ldexp(mantissa | 0x400, exponent - 25), sign)
