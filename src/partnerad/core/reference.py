"""
Image input handling for partnerad.

Turns an uploaded file (path or raw bytes) into a base64 data URI before it
enters the data model, and strips data URI prefixes before images go on the wire.
Accepted types are images only; there is no size or dimension validation.
"""

import base64
import io
import re
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from partnerad.logging_config import get_logger
from partnerad.utils.exceptions import ImageProcessingError, InvalidInputError

logger = get_logger(__name__)

# Formats accepted by the image service as inline data
SUPPORTED_FORMATS = {"PNG", "JPEG", "WEBP"}

DEFAULT_MIME_TYPE = "image/jpeg"

_DATA_URL_PREFIX = re.compile(r"^data:(image/[\w.+-]+);base64,", re.IGNORECASE)


def _infer_format_from_magic(data: bytes) -> str | None:
    """Infer image format from magic bytes. Returns format name (e.g. PNG, JPEG) or None."""
    if len(data) < 12:
        return None
    if data[:8] == b"\x89PNG\r\n\x1a\n":
        return "PNG"
    if data[:2] == b"\xff\xd8":
        return "JPEG"
    if data[:4] == b"RIFF" and data[8:12] == b"WEBP":
        return "WEBP"
    return None


def _normalize_format(fmt: str | None) -> str | None:
    """Normalize to a key in SUPPORTED_FORMATS (JPG -> JPEG, image/png -> PNG), else None."""
    if not fmt:
        return None
    s = fmt.strip().lower()
    if s.startswith("image/"):
        s = s.split("/", 1)[1]
    u = s.upper()
    if u == "JPG":
        return "JPEG"
    return u if u in SUPPORTED_FORMATS else None


def mime_type_for_format(fmt: str) -> str:
    """Return the MIME type for a normalized format name."""
    return f"image/{fmt.lower()}"


def strip_data_url_prefix(value: str) -> str:
    """
    Remove a leading ``data:image/...;base64,`` prefix.

    Values without the prefix are returned unchanged, so raw base64 can be
    passed straight through.
    """
    return _DATA_URL_PREFIX.sub("", value.strip(), count=1)


def mime_type_from_data_url(value: str, default: str = DEFAULT_MIME_TYPE) -> str:
    """Return the MIME type named by a data URI prefix, or default if there is none."""
    match = _DATA_URL_PREFIX.match(value.strip())
    if match is None:
        return default
    return match.group(1).lower()


def create_image_data_url(encoded_image: str, mime_type: str = "image/png") -> str:
    """Wrap a base64 payload as a data URI."""
    return f"data:{mime_type};base64,{encoded_image}"


def _read_source(source: str | Path | bytes) -> tuple[bytes, str]:
    """Return (raw bytes, label for errors) for a path or in-memory bytes."""
    if isinstance(source, bytes):
        if not source:
            raise InvalidInputError("Image data is empty", field="image")
        return source, ""
    path = Path(source)
    if not path.is_file():
        raise FileNotFoundError(f"Image file not found: {path}")
    return path.read_bytes(), str(path)


def load_image_data_url(
    source: str | Path | bytes,
    format_hint: str | None = None,
) -> str:
    """
    Convert an uploaded image into a base64 data URI.

    The bytes are checked with Pillow so non-image files are rejected at the
    upload boundary; the original bytes are encoded unchanged.

    Args:
        source: Path to an image file or the raw bytes of one
        format_hint: Optional format or MIME hint (e.g. 'PNG', 'image/jpeg')

    Returns:
        Data URI, e.g. ``data:image/png;base64,...``

    Raises:
        InvalidInputError: If the data is not an image in a supported format
        ImageProcessingError: If the image cannot be decoded
        FileNotFoundError: If a path source does not exist
    """
    data, label = _read_source(source)

    try:
        with Image.open(io.BytesIO(data)) as image:
            detected = image.format
            image.verify()
    except UnidentifiedImageError as e:
        raise InvalidInputError(
            "Uploaded file is not a recognized image.", field="image"
        ) from e
    except (OSError, SyntaxError, ValueError) as e:
        raise ImageProcessingError(f"Failed to read image: {e}", image_path=label) from e

    if detected:
        fmt = _normalize_format(detected)
    else:
        fmt = _normalize_format(format_hint) or _normalize_format(_infer_format_from_magic(data))
    if fmt is None:
        raise InvalidInputError(
            f"Unsupported image format: {detected or 'unknown'}. "
            f"Supported formats: {', '.join(sorted(SUPPORTED_FORMATS))}",
            field="image_format",
        )

    logger.debug("Loaded image format=%s bytes=%d source=%s", fmt, len(data), label or "<bytes>")
    encoded = base64.b64encode(data).decode("ascii")
    return create_image_data_url(encoded, mime_type_for_format(fmt))
