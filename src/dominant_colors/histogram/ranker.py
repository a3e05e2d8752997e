"""Rank parsed colors by pixel coverage."""

import logging
from collections.abc import Iterable

from ..core.errors import EmptyPaletteError
from ..core.models import ColorRecord, RankedPalette

logger = logging.getLogger(__name__)


def rank(records: Iterable[ColorRecord]) -> RankedPalette:
    """Sort records by pixel count, most prevalent first.

    The sort is stable, so equal counts keep their input order.

    Raises:
        EmptyPaletteError: If there are no records.
    """
    ordered = sorted(records, key=lambda rec: rec.pixel_count, reverse=True)
    if not ordered:
        raise EmptyPaletteError()

    total = sum(rec.pixel_count for rec in ordered)
    logger.debug("Ranked %d colors over %d pixels", len(ordered), total)
    return RankedPalette(colors=tuple(ordered), total_pixels=total)


class ColorRanker:
    """Object wrapper around :func:`rank`."""

    def rank(self, records: Iterable[ColorRecord]) -> RankedPalette:
        return rank(records)
