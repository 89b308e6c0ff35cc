"""
Gemini image model client.
Sends the user photo plus a style prompt and asks for an image-bearing response.
"""
import asyncio
import logging
from typing import Any, Iterator, NamedTuple, Optional

from google import genai
from google.genai import types

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash-image-preview"


class InlineImage(NamedTuple):
    data: bytes
    mime_type: Optional[str]


class GeminiImageClient:
    """Client for Gemini generate_content with image + text response modalities."""

    def __init__(self, api_key: str, model: str = DEFAULT_MODEL):
        self.model = model
        self._client = genai.Client(api_key=api_key)

    def generate_image(self, image_bytes: bytes, mime_type: str, prompt: str) -> Any:
        """Issue exactly one generate_content call. Errors from the SDK propagate."""
        response = self._client.models.generate_content(
            model=self.model,
            contents=[
                types.Part.from_bytes(data=image_bytes, mime_type=mime_type),
                prompt,
            ],
            config=types.GenerateContentConfig(
                response_modalities=["IMAGE", "TEXT"],
            ),
        )
        logger.info("Gemini generate_content returned", extra={"model": self.model})
        return response

    async def agenerate_image(self, image_bytes: bytes, mime_type: str, prompt: str) -> Any:
        """Run generate_image without blocking the event loop."""
        return await asyncio.to_thread(self.generate_image, image_bytes, mime_type, prompt)


def _iter_parts(response: Any) -> Iterator[Any]:
    for candidate in getattr(response, "candidates", None) or []:
        content = getattr(candidate, "content", None)
        for part in getattr(content, "parts", None) or []:
            yield part


def find_inline_image(response: Any) -> Optional[InlineImage]:
    """First response part carrying inline binary data, or None."""
    for part in _iter_parts(response):
        inline = getattr(part, "inline_data", None)
        if inline is not None and getattr(inline, "data", None):
            return InlineImage(inline.data, getattr(inline, "mime_type", None))
    return None
