"""Color-space conversion."""

from .convert import record_to_hsl, rgb_to_hsl

__all__ = ["rgb_to_hsl", "record_to_hsl"]
