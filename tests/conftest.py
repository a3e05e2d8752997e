"""Shared test fixtures and configuration."""

import io

import pytest
from PIL import Image

from dominant_colors.image.magick import ImageMagickHistogram


def make_png(color: tuple[int, int, int] = (255, 0, 0), size: int = 10) -> bytes:
    """Create a solid-color image and return its PNG bytes."""
    img = Image.new("RGB", (size, size), color)
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def png_bytes() -> bytes:
    return make_png()


@pytest.fixture
def png_file(tmp_path, png_bytes):
    """A small red PNG on disk."""
    path = tmp_path / "red.png"
    path.write_bytes(png_bytes)
    return path


@pytest.fixture(autouse=True)
def _reset_magick_verification():
    """Forget which ImageMagick binaries were verified by earlier tests."""
    ImageMagickHistogram._verified_paths.clear()
    yield
    ImageMagickHistogram._verified_paths.clear()
