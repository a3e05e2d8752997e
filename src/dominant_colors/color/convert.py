"""RGB to HSL conversion.

Channels come in normalized to 0-1. Hue is returned in whole degrees and
saturation/lightness in whole percent, rounded with Python's built-in
``round()`` (half-to-even on the float value). A hue that rounds up to
360 is returned as 360, not folded to 0.
"""

from typing import Optional, Union

from ..core.models import ColorRecord, Hsl, Hsla


def rgb_to_hsl(r: float, g: float, b: float, alpha: Optional[float] = None) -> Union[Hsl, Hsla]:
    """Convert normalized RGB (and optional alpha) to integer HSL.

    Returns:
        ``Hsla`` when ``alpha`` is given, otherwise ``Hsl``.
    """
    high = max(r, g, b)
    low = min(r, g, b)

    lightness = (high + low) / 2

    if high == low:
        # Achromatic: any hue is meaningless, report 0
        hue = saturation = 0.0
    else:
        d = high - low
        saturation = d / (2 - high - low) if lightness >= 0.5 else d / (high + low)
        if high == r:
            hue = (g - b) / d + (6 if g < b else 0)
        elif high == g:
            hue = (b - r) / d + 2
        else:
            hue = (r - g) / d + 4
        hue /= 6

    h, s, l = round(hue * 360), round(saturation * 100), round(lightness * 100)
    if alpha is None:
        return Hsl(h, s, l)
    return Hsla(h, s, l, alpha)


def record_to_hsl(record: ColorRecord, with_alpha: bool = False) -> Union[Hsl, Hsla]:
    """Convert a :class:`ColorRecord` by normalizing its channels by 255."""
    return rgb_to_hsl(
        record.r / 255,
        record.g / 255,
        record.b / 255,
        record.alpha if with_alpha else None,
    )
