"""Output projections over a ranked palette.

A :class:`Palette` is built from histogram text (or pre-parsed records)
and derives every representation lazily: the text is parsed and ranked
on first access, and each projection is computed once and reused for the
lifetime of the object. All projections share the same ranked order.
"""

import logging
from collections.abc import Iterable, Iterator, Sequence
from functools import cached_property
from typing import Optional

from .color.convert import record_to_hsl
from .core.models import ColorRecord, Hsl, Hsla, RankedPalette, Rgb, Rgba
from .histogram.parser import HistogramParser
from .histogram.ranker import rank

logger = logging.getLogger(__name__)

# Length of "#RRGGBB"
_HEX_RGB_LENGTH = 7


class Palette:
    """Dominant colors of one histogram, most prevalent first.

    Args:
        histogram: Raw ``histogram:info:`` text. Ignored when ``records``
            is given.
        records: Already-parsed records, bypassing text parsing.

    Errors from parsing (:class:`MalformedHistogramLine`) or ranking
    (:class:`EmptyPaletteError`) are raised on the first projection call,
    not at construction.
    """

    def __init__(
        self,
        histogram: str = "",
        records: Optional[Iterable[ColorRecord]] = None,
    ):
        self._histogram = histogram
        self._records = list(records) if records is not None else None

    @classmethod
    def from_histogram(cls, histogram: str) -> "Palette":
        return cls(histogram=histogram)

    @classmethod
    def from_records(cls, records: Iterable[ColorRecord]) -> "Palette":
        return cls(records=records)

    @classmethod
    def from_entries(cls, entries: Iterable[Sequence]) -> "Palette":
        """Build from ``(count, r, g, b, [alpha,] hex)`` tuples."""
        return cls(records=HistogramParser().parse_entries(entries))

    @property
    def histogram(self) -> str:
        """The histogram text this palette is derived from."""
        return list(self._histogram)

    @cached_property
    def ranked(self) -> RankedPalette:
        records = self._records
        if records is None:
            records = HistogramParser().parse(self.histogram)
        palette = rank(records)
        logger.debug("Palette ready: %d colors", len(palette))
        return palette

    @property
    def colors(self) -> tuple[ColorRecord, ...]:
        return self.ranked.colors

    @property
    def total_pixels(self) -> int:
        return self.ranked.total_pixels

    def __len__(self) -> int:
        return len(self.colors)

    def __iter__(self) -> Iterator[ColorRecord]:
        return iter(self.colors)

    # -- projections ------------------------------------------------------
    # Cached as tuples; callers get a fresh list they are free to mutate.

    @cached_property
    def _hex_alpha(self) -> tuple[str, ...]:
        return tuple(rec.hex for rec in self.colors)

    @cached_property
    def _hex(self) -> tuple[str, ...]:
        return tuple(rec.hex[:_HEX_RGB_LENGTH] for rec in self.colors)

    @cached_property
    def _rgb_alpha(self) -> tuple[Rgba, ...]:
        return tuple(rec.rgba for rec in self.colors)

    @cached_property
    def _rgb(self) -> tuple[Rgb, ...]:
        return tuple(rec.rgb for rec in self.colors)

    @cached_property
    def _hsl_alpha(self) -> tuple[Hsla, ...]:
        return tuple(record_to_hsl(rec, with_alpha=True) for rec in self.colors)

    @cached_property
    def _hsl(self) -> tuple[Hsl, ...]:
        return tuple(record_to_hsl(rec) for rec in self.colors)

    @cached_property
    def _pct(self) -> tuple[float, ...]:
        ranked = self.ranked
        return tuple(ranked.weight(rec) for rec in ranked.colors)

    def to_hex_alpha(self) -> list[str]:
        """Hex strings as emitted by the histogram (``#RRGGBBAA``)."""
        return list(self._hex_alpha)

    def to_hex(self) -> list[str]:
        """Hex strings truncated to ``#RRGGBB``."""
        return list(self._hex)

    def to_rgb_alpha(self) -> list[Rgba]:
        return list(self._rgb_alpha)

    def to_rgb(self) -> list[Rgb]:
        return list(self._rgb)

    def to_hsl_alpha(self) -> list[Hsla]:
        return list(self._hsl_alpha)

    def to_hsl(self) -> list[Hsl]:
        return list(self._hsl)

    def to_pct(self) -> list[float]:
        """Share of each color in percent, rounded to 2 decimal places."""
        return list(self._pct)

    def __repr__(self) -> str:
        if "ranked" in self.__dict__:
            return f"Palette({self.to_hex_alpha()!r})"
        return "Palette(<unparsed>)"
