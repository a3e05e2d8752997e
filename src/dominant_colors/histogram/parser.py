"""Parse ImageMagick ``histogram:info:`` text into color records.

ImageMagick prints one line per quantized color, e.g.::

         12: (255,  0,  0,255) #FF0000FF srgba(255,0,0,1)

Whitespace is not significant, the alpha component is optional and
anything after the hex literal (the color name) is ignored. Hex digits
are uppercase, which keeps them apart from lowercase names like "black".
"""

import logging
import re

from ..core.errors import MalformedHistogramLine
from ..core.models import ColorRecord, alpha_from_channel

logger = logging.getLogger(__name__)

_LINE_RE = re.compile(
    r"(?P<count>[0-9]+):"
    r"\((?P<r>[0-9]+),(?P<g>[0-9]+),(?P<b>[0-9]+)(?:,(?P<a>[0-9]+))?\)"
    r"(?P<hex>#[0-9A-F]{6}(?:[0-9A-F]{2})?)(?![0-9A-F])"
)

_WHITESPACE_RE = re.compile(r"\s+")

# Channel value used when the histogram has no alpha token at all
OPAQUE = 255


def parse_line(line: str) -> ColorRecord:
    """Parse a single histogram line.

    Raises:
        MalformedHistogramLine: If the line does not match the grammar or
            carries out-of-range channel values.
    """
    compact = _WHITESPACE_RE.sub("", line)
    match = _LINE_RE.match(compact)
    if match is None:
        raise MalformedHistogramLine(line)

    channels = [int(match.group(c)) for c in ("r", "g", "b")]
    a = match.group("a")
    a = int(a) if a is not None else OPAQUE
    if any(v > 255 for v in (*channels, a)):
        raise MalformedHistogramLine(line)

    r, g, b = channels
    return ColorRecord(
        pixel_count=int(match.group("count")),
        r=r,
        g=g,
        b=b,
        alpha=alpha_from_channel(a),
        hex=match.group("hex"),
    )


def parse_histogram(text: str) -> list[ColorRecord]:
    """Parse histogram text into records, preserving line order.

    Blank lines are skipped. The first malformed line aborts the whole
    parse; no partial result is returned.
    """
    records = [parse_line(line) for line in text.splitlines() if line.strip()]
    logger.debug("Parsed %d histogram entries", len(records))
    return records


class HistogramParser:
    """Turn histogram text into an ordered list of :class:`ColorRecord`."""

    def parse(self, text: str) -> list[ColorRecord]:
        return parse_histogram(text)

    def parse_entries(self, entries) -> list[ColorRecord]:
        """Accept already-decoded ``(count, r, g, b, [alpha,] hex)`` tuples."""
        return [ColorRecord.from_tuple(entry) for entry in entries]
