"""Image acquisition and histogram generation (ImageMagick)."""

from .magick import ImageMagickHistogram
from .source import ImageSource, ImageSourceKind, resolve_source

__all__ = ["ImageMagickHistogram", "ImageSource", "ImageSourceKind", "resolve_source"]
