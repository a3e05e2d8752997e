"""Dominant colors of raster images, as hex, RGB, HSL and percentages."""

from .core import (
    ColorRecord,
    DominantColorsError,
    EmptyPaletteError,
    HistogramToolError,
    Hsl,
    Hsla,
    MalformedHistogramLine,
    RankedPalette,
    Rgb,
    Rgba,
    SourceError,
    SourceErrorKind,
)
from .extractor import DominantColors
from .palette import Palette

__version__ = "0.1.0"

__all__ = [
    "DominantColors",
    "Palette",
    "ColorRecord",
    "RankedPalette",
    "Rgb",
    "Rgba",
    "Hsl",
    "Hsla",
    "DominantColorsError",
    "MalformedHistogramLine",
    "EmptyPaletteError",
    "SourceError",
    "SourceErrorKind",
    "HistogramToolError",
]
