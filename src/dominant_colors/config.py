"""Configuration management for dominant-colors."""

import logging
import os
import shutil
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

# Default paths
LOG_DIR = Path.home() / ".dominant_colors/logs"

# ImageMagick binary override
MAGICK_BINARY_ENV = "DOMINANT_COLORS_MAGICK"

# ImageMagick 7 ships "magick"; 6.x only has "convert"
MAGICK_CANDIDATES = ("magick", "convert")

# Number of quantized colors requested when the caller gives none
DEFAULT_COLOR_COUNT = 5

# Seconds before an ImageMagick run is abandoned
MAGICK_TIMEOUT = 60

# Extensions used when writing decoded base64 payloads to disk
IMAGE_EXTENSIONS = {
    "image/png": ".png",
    "image/jpeg": ".jpeg",
    "image/jpg": ".jpg",
    "image/gif": ".gif",
    "image/bmp": ".bmp",
    "image/webp": ".webp",
    "image/tiff": ".tif",
    "image/svg+xml": ".svg",
    "image/svg": ".svg",
}


def get_magick_binary() -> Optional[str]:
    """Get the ImageMagick binary to invoke.

    Checks the DOMINANT_COLORS_MAGICK environment variable first, then
    falls back to the first of ``magick`` / ``convert`` found on PATH.

    Returns:
        Binary name or path, or None if ImageMagick is not installed.
    """
    binary = os.environ.get(MAGICK_BINARY_ENV)
    if binary:
        return binary.strip()
    for candidate in MAGICK_CANDIDATES:
        if shutil.which(candidate):
            return candidate
    return None


class Config:
    """Application configuration."""

    def __init__(
        self,
        magick_binary: Optional[str] = None,
        color_count: int = DEFAULT_COLOR_COUNT,
        timeout: float = MAGICK_TIMEOUT,
    ):
        self._magick_binary = magick_binary
        self.color_count = color_count
        self.timeout = timeout

    @property
    def magick_binary(self) -> str:
        """Return the configured binary, else whatever is discoverable."""
        return self._magick_binary or get_magick_binary() or MAGICK_CANDIDATES[0]


def setup_logging(verbose: bool = False) -> None:
    """Configure centralized logging with console and file handlers.

    Sets up the ``dominant_colors`` logger namespace with a rotating file
    handler (``~/.dominant_colors/logs/dominant_colors.log``) and a console
    handler. All child loggers (e.g. ``dominant_colors.histogram.parser``)
    inherit these handlers automatically.

    Args:
        verbose: If True, set console level to DEBUG; otherwise INFO.
                 The file handler always captures DEBUG.
    """
    level = logging.DEBUG if verbose else logging.INFO

    root = logging.getLogger("dominant_colors")
    root.setLevel(logging.DEBUG)

    # Avoid duplicate handlers on repeated calls
    if root.handlers:
        return

    log_format = "%(asctime)s %(name)s %(levelname)s %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(logging.Formatter(log_format, datefmt=date_format))
    root.addHandler(console)

    # Rotating file handler: 5 MB max, keep 3 backups
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        LOG_DIR / "dominant_colors.log",
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(log_format, datefmt=date_format))
    root.addHandler(file_handler)


# Global config instance
config = Config()
