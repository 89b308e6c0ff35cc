"""
Relay client: posts a photo + style to the transform relay and returns the result image.
"""
import logging
from typing import Optional

import httpx

from errors import TransformationError
from models.schemas import ImagePayload
from models.styles import TransformStyle

logger = logging.getLogger(__name__)

GENERIC_SERVER_ERROR = "Failed to process the transformation on the server."
NO_IMAGE_ERROR = "The AI couldn't transform the image. Please try another one."
RESULT_MIME_TYPE = "image/png"


class RelayClient:
    """One POST per transform; no retries, no caching."""

    def __init__(
        self,
        endpoint_url: str,
        timeout_seconds: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.endpoint_url = endpoint_url
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    async def transform(self, image: ImagePayload, style: TransformStyle) -> ImagePayload:
        payload = {
            "base64ImageData": image.data,
            "mimeType": image.mime_type,
            "style": TransformStyle(style).value,
        }
        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds, transport=self._transport) as client:
                r = await client.post(self.endpoint_url, json=payload)
        except httpx.RequestError as e:
            logger.error("Error calling transformation service: %s", e)
            raise TransformationError(f"Could not reach the transformation service: {e.__class__.__name__}") from e

        if not r.is_success:
            raise TransformationError(self._error_message(r), status_code=r.status_code)

        try:
            result = r.json()
        except ValueError:
            result = None
        transformed = result.get("transformedBase64") if isinstance(result, dict) else None
        if not isinstance(transformed, str) or not transformed:
            logger.warning("Transformation service returned no image data")
            raise TransformationError(NO_IMAGE_ERROR, status_code=r.status_code)
        return ImagePayload(data=transformed, mime_type=RESULT_MIME_TYPE)

    @staticmethod
    def _error_message(r: httpx.Response) -> str:
        try:
            data = r.json()
        except ValueError:
            return GENERIC_SERVER_ERROR
        err = data.get("error") if isinstance(data, dict) else None
        if isinstance(err, str) and err.strip():
            return err
        return f"Server responded with status: {r.status_code}"
