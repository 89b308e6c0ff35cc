"""
Relay service – validates a transform request, calls the image model once and maps the result.
"""
import base64
import binascii
import json
import logging
from typing import Any, Callable, NamedTuple, Optional

from pydantic import ValidationError

from clients.gemini_client import GeminiImageClient, find_inline_image
from errors import (
    ConfigurationError,
    MethodNotAllowedError,
    ModelNoOutputError,
    PayloadValidationError,
    RelayError,
    TransportError,
)
from models.schemas import SUPPORTED_MIME_TYPES, TransformRequest, TransformResponse
from models.styles import TransformStyle, get_style_prompt

logger = logging.getLogger(__name__)

ModelClientFactory = Callable[[str], GeminiImageClient]

_FIELD_NAMES = {"base64ImageData", "mimeType", "style"}


class RelayResponse(NamedTuple):
    status_code: int
    payload: dict


class RelayService:
    def __init__(self, api_key: Optional[str], model_client_factory: ModelClientFactory):
        self.api_key = api_key or None
        self.model_client_factory = model_client_factory

    async def handle(self, method: str, body: bytes) -> RelayResponse:
        try:
            if method.upper() != "POST":
                raise MethodNotAllowedError()
            if not self.api_key:
                raise ConfigurationError()
            request = parse_transform_request(body)
            image_bytes = base64.b64decode(request.base64_image_data)
            transformed = await self._invoke_model(image_bytes, request.mime_type, request.style)
        except RelayError as e:
            return RelayResponse(e.status_code, e.to_payload())
        logger.info("Transformed image with style %s", request.style.value)
        return RelayResponse(200, TransformResponse(transformed_base64=transformed).model_dump(by_alias=True))

    async def _invoke_model(self, image_bytes: bytes, mime_type: str, style: TransformStyle) -> str:
        prompt = get_style_prompt(style)
        try:
            client = self.model_client_factory(self.api_key)
            response = await client.agenerate_image(image_bytes, mime_type, prompt)
        except Exception as e:
            logger.exception("Error in transform-image relay: %s", e)
            raise TransportError() from e
        image = find_inline_image(response)
        if image is None:
            logger.warning("Model returned no inline image for style %s", style.value)
            raise ModelNoOutputError()
        return base64.b64encode(image.data).decode("ascii")


def parse_transform_request(body: bytes) -> TransformRequest:
    """Parse and validate a raw request body; raise PayloadValidationError with a field-level message."""
    try:
        data: Any = json.loads(body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise PayloadValidationError("Request body must be valid JSON.")
    if not isinstance(data, dict):
        raise PayloadValidationError("Request body must be a JSON object.")

    missing = sorted(f for f in _FIELD_NAMES if not data.get(f))
    if missing:
        raise PayloadValidationError(f"Missing required image data or style: {', '.join(missing)}.")

    try:
        request = TransformRequest.model_validate(data)
    except ValidationError as e:
        raise PayloadValidationError(_describe_validation_error(e))

    mime_type = request.mime_type.split(";")[0].strip().lower()
    if mime_type not in SUPPORTED_MIME_TYPES:
        raise PayloadValidationError(
            f"Unsupported mimeType '{request.mime_type}'. Expected one of: {', '.join(SUPPORTED_MIME_TYPES)}."
        )
    try:
        base64.b64decode(request.base64_image_data, validate=True)
    except (binascii.Error, ValueError):
        raise PayloadValidationError("base64ImageData is not valid base64.")
    return request.model_copy(update={"mime_type": mime_type})


def _describe_validation_error(e: ValidationError) -> str:
    err = e.errors()[0]
    field = ".".join(str(x) for x in err.get("loc", ())) or "body"
    if field == "style":
        allowed = ", ".join(s.value for s in TransformStyle)
        return f"Invalid style '{err.get('input')}'. Expected one of: {allowed}."
    return f"Invalid {field}: {err.get('msg', 'invalid value')}."
