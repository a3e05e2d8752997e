"""Color histogram generation using ImageMagick."""

import logging
import subprocess
from typing import Optional

from ..config import MAGICK_TIMEOUT, config
from ..core.errors import HistogramToolError

logger = logging.getLogger(__name__)


class ImageMagickHistogram:
    """Quantize an image with ImageMagick and print its color histogram."""

    _verified_paths: set[str] = set()

    def __init__(self, binary: Optional[str] = None, timeout: float = MAGICK_TIMEOUT):
        """Initialize the histogram generator.

        Args:
            binary: ImageMagick binary (``magick`` or ``convert``). Defaults
                to the configured/discovered one.
            timeout: Seconds to wait for a single run.
        """
        self.binary = binary or config.magick_binary
        self.timeout = timeout
        self._verify_binary()

    def _verify_binary(self) -> None:
        """Verify ImageMagick is available (cached per path)."""
        if self.binary in ImageMagickHistogram._verified_paths:
            return

        try:
            result = subprocess.run(
                [self.binary, "-version"],
                capture_output=True,
                text=True,
                timeout=5,
            )
        except FileNotFoundError as e:
            raise HistogramToolError(f"ImageMagick not found at: {self.binary}") from e
        except OSError as e:
            raise HistogramToolError(f"ImageMagick could not be started at {self.binary}: {e}") from e
        except subprocess.TimeoutExpired:
            raise HistogramToolError("ImageMagick timed out")

        if result.returncode != 0:
            raise HistogramToolError("ImageMagick not functional", result.stderr)

        ImageMagickHistogram._verified_paths.add(self.binary)

    def build_command(self, location: str, colors: int) -> list[str]:
        """Build the argument list for a histogram run."""
        return [
            self.binary,
            location,
            "-format", "%c",
            "-colors", str(colors),
            "-depth", "8",
            "-alpha", "on",
            "histogram:info:",
        ]

    def generate(self, location: str, colors: int) -> str:
        """Reduce an image to ``colors`` colors and return the histogram text.

        Args:
            location: File path or URL readable by ImageMagick.
            colors: Number of colors to quantize to.

        Returns:
            ``histogram:info:`` output, one color per line.

        Raises:
            ValueError: If ``colors`` is not a positive integer.
            HistogramToolError: If ImageMagick times out or fails.
        """
        if isinstance(colors, bool) or not isinstance(colors, int) or colors < 1:
            raise ValueError(f"colors must be a positive integer, got {colors!r}")

        cmd = self.build_command(location, colors)
        logger.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise HistogramToolError(f"ImageMagick timed out after {self.timeout}s on {location}") from e
        except OSError as e:
            raise HistogramToolError(f"ImageMagick could not be started at {self.binary}: {e}") from e

        if result.returncode != 0:
            logger.warning("ImageMagick failed on %s: %s", location, result.stderr.strip())
            raise HistogramToolError(
                f"ImageMagick exited with status {result.returncode} on {location}",
                result.stderr,
            )

        return result.stdout
