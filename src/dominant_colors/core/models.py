"""Pydantic models for parsed histogram entries."""

from collections.abc import Sequence
from typing import NamedTuple

from pydantic import BaseModel, Field, computed_field, model_validator

from .errors import EmptyPaletteError


class Rgb(NamedTuple):
    r: int
    g: int
    b: int


class Rgba(NamedTuple):
    r: int
    g: int
    b: int
    alpha: float


class Hsl(NamedTuple):
    """Hue in degrees (0-360), saturation and lightness in percent."""
    hue: int
    saturation: int
    lightness: int


class Hsla(NamedTuple):
    hue: int
    saturation: int
    lightness: int
    alpha: float


def alpha_from_channel(a: int) -> float:
    """Convert an 8-bit alpha channel to a 0-1 float with 2 decimals."""
    return round(a / 255, 2)


class ColorRecord(BaseModel):
    """One histogram entry: a quantized color and how many pixels use it."""
    pixel_count: int = Field(ge=0, description="Pixels quantized to this color")
    r: int = Field(ge=0, le=255)
    g: int = Field(ge=0, le=255)
    b: int = Field(ge=0, le=255)
    alpha: float = Field(default=1.0, ge=0.0, le=1.0)
    hex: str = Field(pattern=r"^#[0-9A-F]{6}([0-9A-F]{2})?$", description="Hex as emitted by the tool")

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def _default_alpha(cls, data):
        # Explicit None means the source carried no alpha channel
        if isinstance(data, dict) and data.get("alpha", 1.0) is None:
            data = {**data, "alpha": 1.0}
        return data

    @computed_field
    @property
    def rgb(self) -> Rgb:
        return Rgb(self.r, self.g, self.b)

    @computed_field
    @property
    def rgba(self) -> Rgba:
        return Rgba(self.r, self.g, self.b, self.alpha)

    @classmethod
    def from_tuple(cls, entry: Sequence) -> "ColorRecord":
        """Build a record from ``(count, r, g, b, [alpha,] hex)``.

        ``alpha`` is the already-normalized 0-1 value; ``None`` or a
        missing element means fully opaque.
        """
        if len(entry) == 5:
            count, r, g, b, hex_ = entry
            alpha = None
        elif len(entry) == 6:
            count, r, g, b, alpha, hex_ = entry
        else:
            raise ValueError(f"Expected 5 or 6 fields, got {len(entry)}: {entry!r}")
        return cls(pixel_count=count, r=r, g=g, b=b, alpha=alpha, hex=hex_)


class RankedPalette(BaseModel):
    """Colors ordered by pixel coverage, most prevalent first."""
    colors: tuple[ColorRecord, ...]
    total_pixels: int = Field(ge=0)

    model_config = {"frozen": True}

    def __len__(self) -> int:
        return len(self.colors)

    def weight(self, record: ColorRecord) -> float:
        """Return the share of ``record`` in percent, rounded to 2 places.

        Raises:
            EmptyPaletteError: If the palette covers zero pixels.
        """
        if self.total_pixels == 0:
            raise EmptyPaletteError("Histogram colors cover zero pixels")
        return round(record.pixel_count / self.total_pixels * 100, 2)
