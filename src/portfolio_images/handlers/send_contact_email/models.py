"""Pydantic models for the contact form request/response."""

from pydantic import BaseModel, ConfigDict, Field


class ContactInquiry(BaseModel):
    """Contact form submission.

    Required fields are checked by the contact service so that every
    missing combination yields the same message.
    """

    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)

    name: str | None = Field(None, max_length=200)
    email: str | None = Field(None, max_length=320)
    phone: str | None = Field(None, max_length=50)
    session_type: str | None = Field(None, alias="sessionType", max_length=100)
    message: str | None = Field(None, max_length=5000)


class ContactResponse(BaseModel):
    """Response model for a delivered inquiry."""

    success: bool = Field(True, description="Always true on success")
    message: str = Field(..., description="Success message")
