from .curve import (
    CURVE_BYTES,
    decode_curve,
    encode_curve,
    evaluate,
    find_bracket,
    normalize_keyframes,
    sample_curve,
    sample_times,
)

__all__ = [
    "CURVE_BYTES",
    "decode_curve",
    "encode_curve",
    "evaluate",
    "find_bracket",
    "normalize_keyframes",
    "sample_curve",
    "sample_times",
]
