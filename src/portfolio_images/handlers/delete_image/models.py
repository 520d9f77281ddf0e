"""Pydantic models for delete image request/response."""

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class DeleteImageRequest(BaseModel):
    """Validation model for delete image request."""

    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)

    image_key: StrictStr = Field(
        ...,
        alias="key",
        min_length=1,
        description="Image key to delete",
    )


class DeleteImageResponse(BaseModel):
    """Response model for successful image deletion."""

    success: bool = Field(True, description="Always true on success")
    message: str = Field(..., description="Success message")
