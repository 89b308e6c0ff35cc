"""
Encoder: raw image bytes / files / data URLs <-> transport-safe ImagePayload.
"""
import base64
import binascii
import logging
import mimetypes
from pathlib import Path
from typing import Optional, Union

from errors import EncodingError
from models.schemas import SUPPORTED_MIME_TYPES, ImagePayload

logger = logging.getLogger(__name__)


def normalize_mime_type(mime_type: Optional[str]) -> str:
    """Lowercase and strip parameters; raise EncodingError if not an allowed image type."""
    if not mime_type or not mime_type.strip():
        raise EncodingError("No media type declared for the image")
    normalized = mime_type.split(";")[0].strip().lower()
    if normalized not in SUPPORTED_MIME_TYPES:
        raise EncodingError(f"Unsupported image type: {normalized}")
    return normalized


def encode_image(data: bytes, mime_type: str) -> ImagePayload:
    if not data:
        raise EncodingError("Image file is empty")
    normalized = normalize_mime_type(mime_type)
    return ImagePayload(data=base64.b64encode(data).decode("ascii"), mime_type=normalized)


def encode_file(path: Union[str, Path], mime_type: Optional[str] = None) -> ImagePayload:
    """Read *path* once and encode it. Media type is guessed from the file name if not given."""
    p = Path(path)
    declared = mime_type or mimetypes.guess_type(p.name)[0]
    try:
        data = p.read_bytes()
    except OSError as e:
        logger.warning("Could not read image file %s: %s", p, e)
        raise EncodingError(f"Could not read image file: {p.name}") from e
    return encode_image(data, declared)


def parse_data_url(data_url: str) -> ImagePayload:
    """Split a ``data:<type>;base64,<payload>`` URL into an ImagePayload."""
    meta, sep, payload = (data_url or "").partition(",")
    if not sep or not meta or not payload:
        raise EncodingError()
    if not meta.startswith("data:") or not meta.endswith(";base64"):
        raise EncodingError()
    mime_type = normalize_mime_type(meta[len("data:"):-len(";base64")])
    _b64decode(payload)
    return ImagePayload(data=payload, mime_type=mime_type)


def decode_image(payload: ImagePayload) -> bytes:
    return _b64decode(payload.data)


def _b64decode(data: str) -> bytes:
    try:
        return base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise EncodingError("Image data is not valid base64") from e
