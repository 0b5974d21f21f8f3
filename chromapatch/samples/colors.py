from ..colors.color import Color

# Primaries
BLACK = Color(0, 0, 0, 255)
WHITE = Color(255, 255, 255, 255)
RED = Color(255, 0, 0, 255)
GREEN = Color(0, 255, 0, 255)
BLUE = Color(0, 0, 255, 255)
TRANSPARENT = Color(0, 0, 0, 0)

# Save/load screen curve keyframes
SAVE_LOAD_DARK = Color(0x99, 0x25, 0x4C, 0xFF)
SAVE_LOAD_MID = Color(0xCC, 0x19, 0x61, 0xFF)
SAVE_LOAD_LIGHT = Color(0xF2, 0x26, 0x74, 0xFF)

save_load_keyframes = {
    0.0: SAVE_LOAD_DARK,
    0.4: SAVE_LOAD_MID,
    1.0: SAVE_LOAD_LIGHT,
}

# One color of every shape the encoders care about: extremes, odd values, alpha
sample_colors = [
    BLACK,
    WHITE,
    RED,
    GREEN,
    BLUE,
    TRANSPARENT,
    Color(1, 2, 3, 4),
    Color(127, 128, 129, 130),
    Color(0x12, 0x34, 0x56, 0x78),
    Color(254, 253, 252, 251),
    SAVE_LOAD_DARK,
]
