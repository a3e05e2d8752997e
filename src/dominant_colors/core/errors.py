"""Exception types raised by dominant-colors."""

from enum import Enum
from typing import Optional


class DominantColorsError(Exception):
    """Base class for every error raised by this package."""


class MalformedHistogramLine(DominantColorsError, ValueError):
    """A histogram line did not match the expected grammar.

    The offending line is kept on ``line`` exactly as it was received.
    """

    def __init__(self, line: str):
        self.line = line
        super().__init__(f"Malformed histogram line: {line!r}")


class EmptyPaletteError(DominantColorsError, ValueError):
    """The histogram contained no colors, so no ratio can be computed."""

    def __init__(self, message: str = "Histogram contains no colors"):
        super().__init__(message)


class SourceErrorKind(str, Enum):
    """Reasons an image source could not be acquired."""
    FILE_NOT_FOUND = "file_not_found"
    INVALID_BASE64 = "invalid_base64"
    URL_NOT_FOUND = "url_not_found"
    INVALID_URL = "invalid_url"
    NOT_AN_IMAGE = "not_an_image"
    EMPTY_SOURCE = "empty_source"


class SourceError(DominantColorsError):
    """An image source could not be acquired.

    Args:
        kind: Which acquisition step failed.
        source: The source identifier as given by the caller (base64
                payloads are truncated for readability).
        message: Optional human-readable detail.
    """

    def __init__(self, kind: SourceErrorKind, source: object = None, message: Optional[str] = None):
        self.kind = kind
        self.source = _preview(source)
        detail = message or kind.value.replace("_", " ")
        super().__init__(f"{detail}: {self.source}" if self.source else detail)


class HistogramToolError(DominantColorsError, RuntimeError):
    """ImageMagick was missing, timed out, or exited with an error."""

    def __init__(self, message: str, stderr: str = ""):
        self.stderr = stderr
        super().__init__(message)


def _preview(source: object, limit: int = 80) -> str:
    if source is None:
        return ""
    if isinstance(source, bytes):
        return f"<{len(source)} bytes>"
    text = str(source)
    if len(text) > limit:
        return text[:limit] + "..."
    return text
