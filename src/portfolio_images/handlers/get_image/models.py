from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator


class GetImageRequest(BaseModel):
    """Validation model for get image request."""

    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)

    image_key: StrictStr = Field(
        ...,
        alias="key",
        min_length=1,
        description="Image key to retrieve",
    )

    @field_validator("image_key")
    @classmethod
    def validate_image_key_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Image key is required")
        return value
