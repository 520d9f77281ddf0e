"""Shared image models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBytes, StrictInt, StrictStr


class ImageRecord(BaseModel):
    """Metadata for one logical image slot, keyed by `imageKey`.

    Field aliases are the wire names used by the API responses and by
    the persisted JSON document.
    """

    model_config = ConfigDict(populate_by_name=True)

    image_key: StrictStr = Field(
        ..., alias="imageKey", min_length=1, description="Caller-chosen image slot key"
    )
    url: StrictStr = Field(..., description="Public URL of the current blob")
    storage_handle: StrictStr | None = Field(
        None, alias="publicId", description="Opaque blob store deletion handle"
    )
    original_name: StrictStr = Field(
        ..., alias="originalName", description="File name sent by the client"
    )
    size_bytes: StrictInt = Field(..., alias="size", ge=0, description="Upload size in bytes")
    mime_type: StrictStr = Field(
        ..., alias="mimetype", description="MIME type declared at upload (e.g. image/jpeg)"
    )
    uploaded_at: StrictStr = Field(
        ..., alias="uploadedAt", description="ISO-8601 creation or overwrite timestamp (UTC)"
    )

    def to_item(self) -> dict[str, Any]:
        """Serialize including the key, as stored in a document database."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def to_response(self) -> dict[str, Any]:
        """Serialize the value shape returned by the API and the JSON file store."""
        return self.model_dump(by_alias=True, exclude_none=True, exclude={"image_key"})


class UploadedFile(BaseModel):
    """An inbound file as received at the API boundary."""

    file_data: StrictBytes = Field(..., description="Raw file content")
    original_name: StrictStr = Field(..., description="Client-side file name")
    mime_type: StrictStr = Field(..., description="Declared MIME type")
    size_bytes: StrictInt = Field(..., ge=0, description="Size in bytes")


class StoredBlob(BaseModel):
    """Result of writing bytes to a blob store."""

    url: StrictStr
    handle: StrictStr
