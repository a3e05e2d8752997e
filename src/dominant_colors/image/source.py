"""Resolve a caller-supplied image source to something ImageMagick reads.

A source may be a filesystem path, an ``http(s)`` URL, a ``data:`` URI,
a bare base64 string, or raw image bytes. Base64 and byte payloads are
written to a temporary file that is removed when the returned
:class:`ImageSource` is closed. URLs are validated but never fetched here.
"""

import base64
import binascii
import io
import logging
import re
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union
from urllib.parse import urlparse

from PIL import Image, UnidentifiedImageError

from ..config import IMAGE_EXTENSIONS
from ..core.errors import SourceError, SourceErrorKind

logger = logging.getLogger(__name__)

_DATA_URI_RE = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)?(?P<params>(;[^;,]*)*?);base64,(?P<data>.*)$", re.DOTALL)
_BASE64_RE = re.compile(r"^[A-Za-z0-9+/\s]+={0,2}$")

# Bare strings shorter than this are treated as paths, never as base64
_MIN_BASE64_LENGTH = 32

_REMOTE_SCHEMES = {"http", "https"}

# Pillow cannot decode SVG; ImageMagick can, so skip sniffing for these
_UNSNIFFABLE_SUFFIXES = {".svg"}

SourceLike = Union[str, bytes, Path, None]


class ImageSourceKind(str, Enum):
    """Where a resolved image lives."""
    FILE = "file"
    URL = "url"
    DATA = "data"


@dataclass
class ImageSource:
    """A resolved source ready to hand to ImageMagick."""
    location: str
    kind: ImageSourceKind
    temporary: bool = False

    @property
    def is_remote(self) -> bool:
        return self.kind is ImageSourceKind.URL

    def close(self) -> None:
        """Remove the backing temporary file, if any."""
        if self.temporary:
            Path(self.location).unlink(missing_ok=True)
            self.temporary = False

    def __enter__(self) -> "ImageSource":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def sniff_image(data: bytes) -> Optional[str]:
    """Return the Pillow format name of ``data``, or None if not an image."""
    try:
        with Image.open(io.BytesIO(data)) as img:
            fmt = img.format
            img.verify()
    except (UnidentifiedImageError, OSError, SyntaxError, ValueError):
        return None
    return fmt


def _write_temp(data: bytes, suffix: str) -> ImageSource:
    with tempfile.NamedTemporaryFile(prefix="dominant_colors_", suffix=suffix, delete=False) as f:
        f.write(data)
    logger.debug("Wrote %d decoded bytes to %s", len(data), f.name)
    return ImageSource(location=f.name, kind=ImageSourceKind.DATA, temporary=True)


def _from_bytes(data: bytes, source: object, mime: Optional[str] = None) -> ImageSource:
    if not data:
        raise SourceError(SourceErrorKind.EMPTY_SOURCE, source)

    suffix = IMAGE_EXTENSIONS.get(mime or "")
    if suffix in _UNSNIFFABLE_SUFFIXES:
        return _write_temp(data, suffix)

    fmt = sniff_image(data)
    if fmt is None:
        raise SourceError(SourceErrorKind.NOT_AN_IMAGE, source)
    return _write_temp(data, suffix or f".{fmt.lower()}")


def _decode_base64(payload: str, source: object) -> bytes:
    try:
        return base64.b64decode("".join(payload.split()), validate=True)
    except (binascii.Error, ValueError) as e:
        raise SourceError(SourceErrorKind.INVALID_BASE64, source, str(e)) from e


def _from_url(text: str) -> ImageSource:
    parsed = urlparse(text)
    if parsed.scheme.lower() not in _REMOTE_SCHEMES or not parsed.netloc:
        raise SourceError(SourceErrorKind.INVALID_URL, text)
    return ImageSource(location=text, kind=ImageSourceKind.URL)


def _looks_like_base64(text: str) -> bool:
    """Tell a bare base64 payload apart from a missing relative path.

    A ``/`` is valid base64, so strings containing one only qualify when
    their length is a multiple of 4, which ``dir/name`` paths rarely are.
    """
    if len(text) < _MIN_BASE64_LENGTH or not _BASE64_RE.match(text):
        return False
    if "/" in text:
        return len("".join(text.split())) % 4 == 0
    return True


def _path_exists(path: Path) -> bool:
    try:
        return path.exists()
    except OSError:
        # Long base64 payloads can exceed the filesystem name limit
        return False


def _from_path(path: Path) -> ImageSource:
    if not path.is_file():
        raise SourceError(SourceErrorKind.FILE_NOT_FOUND, str(path))
    if path.stat().st_size == 0:
        raise SourceError(SourceErrorKind.EMPTY_SOURCE, str(path))
    if path.suffix.lower() not in _UNSNIFFABLE_SUFFIXES and sniff_image(path.read_bytes()) is None:
        raise SourceError(SourceErrorKind.NOT_AN_IMAGE, str(path))
    return ImageSource(location=str(path), kind=ImageSourceKind.FILE)


def resolve_source(source: SourceLike) -> ImageSource:
    """Classify ``source`` and return an :class:`ImageSource`.

    Raises:
        SourceError: With ``kind`` set to the failing acquisition step.
    """
    if source is None:
        raise SourceError(SourceErrorKind.EMPTY_SOURCE)

    if isinstance(source, bytes):
        return _from_bytes(source, source)

    if isinstance(source, Path):
        return _from_path(source)

    text = source.strip()
    if not text:
        raise SourceError(SourceErrorKind.EMPTY_SOURCE)

    if text.startswith("data:"):
        match = _DATA_URI_RE.match(text)
        if match is None:
            raise SourceError(SourceErrorKind.INVALID_BASE64, text, "malformed data URI")
        data = _decode_base64(match.group("data"), text)
        return _from_bytes(data, text, (match.group("mime") or "").lower())

    if "://" in text:
        return _from_url(text)

    path = Path(text).expanduser()
    if _path_exists(path):
        return _from_path(path)

    if _looks_like_base64(text):
        return _from_bytes(_decode_base64(text, text), text)

    raise SourceError(SourceErrorKind.FILE_NOT_FOUND, text)
