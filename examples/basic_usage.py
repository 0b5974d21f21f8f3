"""Basic chromapatch usage examples.

Run directly with:
    python examples/basic_usage.py

Patches a scratch file instead of a real asset so it can run anywhere.
"""
import tempfile
from pathlib import Path

from chromapatch import (
    ChannelOrder,
    Color,
    ComponentEncoding,
    read_color,
    read_color_curve,
    write_blueprint_split_color,
    write_color,
    write_color_curve,
    write_colors,
)
from chromapatch.samples.colors import save_load_keyframes


def demonstrate_colors(path: Path) -> None:
    # Same color, three encodings.
    accent = Color.from_hex("#F22674")
    write_color(path, 0x10, accent, ChannelOrder.BGRA)
    write_color(path, 0x20, accent, ChannelOrder.RGBA, ComponentEncoding.FLOAT)
    write_color(path, 0x40, accent, ChannelOrder.RGB, ComponentEncoding.HALF)
    print("BGRA bytes:", path.read_bytes()[0x10:0x14].hex(" "))
    print("Read back (float):", read_color(path, 0x20, "rgba", "float"))

    # One color at several offsets of the same asset.
    write_colors(path, Color(0x00, 0xFF, 0x00), [
        (0x100, ChannelOrder.BGRA),
        (0x180, ChannelOrder.BGRA),
    ])

    # Blueprint color whose channels live 0x35 bytes apart.
    write_blueprint_split_color(path, 0x200, accent, ChannelOrder.BGRA)


def demonstrate_curves(path: Path) -> None:
    write_color_curve(path, 0x4A6, save_load_keyframes)
    table = read_color_curve(path, 0x4A6)
    print("Curve start:", table[0].round(3))
    print("Curve end:  ", table[-1].round(3))


if __name__ == "__main__":
    with tempfile.TemporaryDirectory() as tmp:
        asset = Path(tmp) / "example.uasset"
        asset.write_bytes(bytes(0x800))
        demonstrate_colors(asset)
        demonstrate_curves(asset)
