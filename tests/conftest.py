import pytest


@pytest.fixture
def asset_file(tmp_path):
    """A 100-byte zero-filled stand-in for an asset file."""
    path = tmp_path / "asset.uasset"
    path.write_bytes(bytes(100))
    return path


@pytest.fixture
def large_asset_file(tmp_path):
    """A zero-filled file big enough for curves and split colors."""
    path = tmp_path / "large.uasset"
    path.write_bytes(bytes(0x1000))
    return path
