import math

import numpy as np
import pytest

from chromapatch.conversions.numbers import (
    F32_MAX,
    f32_bits,
    f32_to_half16,
    fits_f32,
    half16_to_f32,
    unit_channel,
)


def numpy_half_bits(value) -> int:
    return int(np.array([value], dtype=np.float32).astype(np.float16).view(np.uint16)[0])


def test_known_patterns():
    assert f32_to_half16(0.0) == 0x0000
    assert f32_to_half16(-0.0) == 0x8000
    assert f32_to_half16(1.0) == 0x3C00
    assert f32_to_half16(-2.0) == 0xC000
    assert f32_to_half16(0.5) == 0x3800
    assert f32_to_half16(65504.0) == 0x7BFF
    assert f32_to_half16(2.0 ** -14) == 0x0400
    assert f32_to_half16(2.0 ** -24) == 0x0001


def test_overflow_becomes_infinity():
    assert f32_to_half16(65520.0) == 0x7C00
    assert f32_to_half16(1e10) == 0x7C00
    assert f32_to_half16(-1e10) == 0xFC00
    assert f32_to_half16(math.inf) == 0x7C00
    assert f32_to_half16(-math.inf) == 0xFC00


def test_underflow_becomes_zero():
    assert f32_to_half16(2.0 ** -26) == 0x0000
    assert f32_to_half16(-(2.0 ** -26)) == 0x8000
    # Exactly half of the smallest subnormal ties to even (zero)
    assert f32_to_half16(2.0 ** -25) == 0x0000


def test_nan_stays_nan():
    bits = f32_to_half16(math.nan)
    assert bits & 0x7C00 == 0x7C00
    assert bits & 0x03FF != 0
    assert math.isnan(half16_to_f32(bits))


def test_round_to_nearest_even():
    # 1 + 2^-11 sits exactly between 1.0 and the next half: rounds to even (1.0)
    assert f32_to_half16(1.0 + 2.0 ** -11) == 0x3C00
    # 1 + 3 * 2^-11 is between 0x3C01 and 0x3C02: rounds to even (0x3C02)
    assert f32_to_half16(1.0 + 3 * 2.0 ** -11) == 0x3C02
    # Just above the halfway point rounds up
    assert f32_to_half16(1.0 + 2.0 ** -11 + 2.0 ** -20) == 0x3C01


@pytest.mark.parametrize("value", [
    0.1, 0.2, 1 / 3, 0.999, 1e-5, 6.1e-5, 3.0e-7, 123.456, 2048.5, 60000.0, -0.75, -1e-6,
])
def test_matches_numpy(value):
    assert f32_to_half16(value) == numpy_half_bits(value)


def test_all_channel_values_match_numpy():
    for channel in range(256):
        unit = unit_channel(channel)
        assert f32_to_half16(unit) == numpy_half_bits(unit), channel


def test_dense_sweep_matches_numpy():
    rng = np.random.default_rng(1234)
    values = np.concatenate([
        rng.uniform(-70000, 70000, 500),
        rng.uniform(-1, 1, 500),
        rng.uniform(-1e-4, 1e-4, 500),
    ]).astype(np.float32)
    for value in values:
        assert f32_to_half16(value) == numpy_half_bits(value), float(value)


def test_half16_to_f32_is_exact_for_every_pattern():
    patterns = np.arange(0x10000, dtype=np.uint16)
    expected = patterns.view(np.float16).astype(np.float64)
    for bits, value in zip(patterns, expected):
        decoded = half16_to_f32(int(bits))
        if math.isnan(value):
            assert math.isnan(decoded)
        else:
            assert decoded == value
            assert math.copysign(1.0, decoded) == math.copysign(1.0, value)


def test_half16_to_f32_round_trip():
    for bits in range(0x10000):
        value = half16_to_f32(bits)
        if math.isnan(value):
            continue
        assert f32_to_half16(value) == bits


def test_half16_to_f32_rejects_out_of_range():
    with pytest.raises(ValueError):
        half16_to_f32(0x10000)
    with pytest.raises(ValueError):
        half16_to_f32(-1)


def test_f32_bits():
    assert f32_bits(1.0) == 0x3F800000
    assert f32_bits(-0.0) == 0x80000000


def test_unit_channel_is_single_precision():
    assert isinstance(unit_channel(128), np.float32)
    assert unit_channel(255) == np.float32(1.0)
    assert unit_channel(0) == np.float32(0.0)
    assert unit_channel(51) == np.float32(51) / np.float32(255)


def test_fits_f32():
    assert fits_f32(0.5)
    assert fits_f32(-F32_MAX)
    assert fits_f32(2 ** 100)
    assert not fits_f32(1e39)
    assert not fits_f32(10 ** 400)
    assert not fits_f32(math.inf)
    assert not fits_f32(math.nan)
