"""Dominant colors of an image source.

Ties source resolution, ImageMagick quantization and the palette
projections together. Nothing runs until the first projection is
requested; the histogram is then generated once and cached.
"""

import logging
from functools import cached_property
from typing import Optional

from .config import config
from .core.errors import HistogramToolError, SourceError, SourceErrorKind
from .image.magick import ImageMagickHistogram
from .image.source import SourceLike, resolve_source
from .palette import Palette

logger = logging.getLogger(__name__)


class DominantColors(Palette):
    """Extract the ``colors`` most prevalent colors of ``source``.

    Args:
        source: File path, ``http(s)`` URL, ``data:`` URI, base64 string
            or raw image bytes.
        colors: Number of colors to quantize to. Defaults to
            ``config.color_count``.
        tool: Histogram generator; defaults to :class:`ImageMagickHistogram`.

    Example::

        dc = DominantColors("cover.png", 3)
        dc.to_hex()   # ['#1A2B3C', ...]
        dc.to_pct()   # [61.2, 25.4, 13.4]
    """

    def __init__(
        self,
        source: SourceLike,
        colors: Optional[int] = None,
        tool: Optional[ImageMagickHistogram] = None,
    ):
        super().__init__()
        self.source = source
        self.color_count = colors if colors is not None else config.color_count
        self._tool = tool

    @cached_property
    def histogram(self) -> str:
        with resolve_source(self.source) as image:
            tool = self._tool or ImageMagickHistogram(timeout=config.timeout)
            try:
                text = tool.generate(image.location, self.color_count)
            except HistogramToolError as e:
                if image.is_remote:
                    raise SourceError(SourceErrorKind.URL_NOT_FOUND, image.location, e.stderr.strip() or None) from e
                raise
        logger.info("Generated %d-color histogram for %s", self.color_count, image.kind.value)
        return text

    def __repr__(self) -> str:
        return f"DominantColors({self.source!r}, {self.color_count})"
