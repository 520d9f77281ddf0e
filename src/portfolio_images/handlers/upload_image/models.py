"""Pydantic models for image upload request/response."""

import base64
import binascii

from aws_lambda_powertools import Logger
from pydantic import BaseModel, ConfigDict, Field, field_validator

from portfolio_images.core.models.image import UploadedFile
from portfolio_images.core.utils.constants import (
    UPLOAD_FIELD_NAME,
    format_file_size,
    get_max_upload_bytes,
)
from portfolio_images.core.utils.mime import resolve_mime_type

logger = Logger(utc=True)


class ImageUploadRequest(BaseModel):
    """Validation model for image upload request.

    `image` and `imageKey` are optional here so that their absence is
    reported by the upload service with the same messages as any other
    caller gets.
    """

    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)

    image: str | None = Field(None, description="Base64 encoded image file")
    image_key: str | None = Field(
        None, alias="imageKey", max_length=255, description="Image slot key"
    )
    file_name: str | None = Field(
        None, alias="fileName", max_length=255, description="Original file name"
    )
    mime_type: str | None = Field(
        None, alias="mimeType", max_length=100, description="Declared MIME type"
    )

    @field_validator("image")
    @classmethod
    def validate_image(cls, value: str | None) -> str | None:
        """
        Validate base64 file:
        - must decode correctly
        - must not exceed the configured upload limit
        """
        if not value:
            return None

        try:
            file_data = base64.b64decode(value, validate=True)
        except (binascii.Error, ValueError) as e:
            logger.error(f"File validation error: Invalid base64 - {e}")
            raise ValueError("Invalid base64 encoded file") from e

        max_bytes = get_max_upload_bytes()
        if len(file_data) > max_bytes:
            logger.error("File size validation error: File size exceeds limit")
            raise ValueError(f"File size exceeds {format_file_size(max_bytes)} limit")

        return value

    def to_uploaded_file(self) -> UploadedFile | None:
        """Decode the payload, or return None when no file content was sent."""
        if not self.image:
            return None

        file_data = base64.b64decode(self.image)
        if not file_data:
            return None

        return UploadedFile(
            file_data=file_data,
            original_name=self.file_name or UPLOAD_FIELD_NAME,
            mime_type=resolve_mime_type(self.mime_type, file_data),
            size_bytes=len(file_data),
        )


class ImageUploadResponse(BaseModel):
    """Response model for successful image upload."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = Field(True, description="Always true on success")
    image_url: str = Field(..., alias="imageUrl", description="Public URL of the stored image")
    image_key: str = Field(..., alias="imageKey", description="Image slot key")
    public_id: str | None = Field(
        None, alias="publicId", description="Blob store deletion handle"
    )
