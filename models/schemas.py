from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from .styles import TransformStyle

SUPPORTED_MIME_TYPES = ("image/png", "image/jpeg", "image/webp")


class ImagePayload(BaseModel):
    model_config = ConfigDict(frozen=True)
    data: str = Field(..., description="Base64-encoded image bytes")
    mime_type: str = Field(..., description="Media type of the decoded bytes")


class TransformRequest(BaseModel):
    """Wire body posted to the relay."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)
    base64_image_data: str = Field(..., alias="base64ImageData", min_length=1)
    mime_type: str = Field(..., alias="mimeType", min_length=1)
    style: TransformStyle


class TransformResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    transformed_base64: str = Field(..., alias="transformedBase64")


class TransformErrorResponse(BaseModel):
    error: str
    code: Optional[str] = None


class StyleDescription(BaseModel):
    id: TransformStyle
    title: str
    description: str
