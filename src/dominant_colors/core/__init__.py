"""Core records and errors shared by every stage of the pipeline."""

from .errors import (
    DominantColorsError,
    EmptyPaletteError,
    HistogramToolError,
    MalformedHistogramLine,
    SourceError,
    SourceErrorKind,
)
from .models import ColorRecord, Hsl, Hsla, RankedPalette, Rgb, Rgba

__all__ = [
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
