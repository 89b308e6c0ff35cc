"""
Error taxonomy shared by the encoder, the relay service and the relay client.
"""
from typing import Optional

from models.schemas import TransformErrorResponse


class FlashbackError(Exception):
    pass


class EncodingError(FlashbackError):
    """Local input could not be read or encoded."""

    public_message = "Invalid file format"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.public_message)


class RelayError(FlashbackError):
    """Failure raised inside the relay; carries the status and client-facing message."""

    status_code = 500
    code = "internal_error"
    public_message = "An internal error occurred while transforming the image."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.public_message
        super().__init__(self.message)

    def to_payload(self) -> dict:
        return TransformErrorResponse(error=self.message, code=self.code).model_dump()


class MethodNotAllowedError(RelayError):
    status_code = 405
    code = "method_not_allowed"
    public_message = "Method Not Allowed"


class PayloadValidationError(RelayError):
    status_code = 400
    code = "validation_error"
    public_message = "Missing required image data or style."


class ConfigurationError(RelayError):
    code = "configuration_error"
    public_message = "Server configuration error: API key is not set up."


class ModelNoOutputError(RelayError):
    code = "model_no_output"
    public_message = "The AI model did not return an image. Please try a different photo."


class TransportError(RelayError):
    code = "transport_error"
    public_message = "An internal error occurred while transforming the image."


class TransformationError(FlashbackError):
    """Raised by the relay client; message is always human-readable."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
