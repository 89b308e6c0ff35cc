from .schemas import (
    SUPPORTED_MIME_TYPES,
    ImagePayload,
    StyleDescription,
    TransformErrorResponse,
    TransformRequest,
    TransformResponse,
)
from .styles import TransformStyle, download_filename, get_style_info, get_style_prompt

__all__ = [
    "SUPPORTED_MIME_TYPES",
    "ImagePayload",
    "StyleDescription",
    "TransformErrorResponse",
    "TransformRequest",
    "TransformResponse",
    "TransformStyle",
    "download_filename",
    "get_style_info",
    "get_style_prompt",
]
