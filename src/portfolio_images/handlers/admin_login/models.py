"""Pydantic models for admin login."""

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class AdminLoginRequest(BaseModel):
    """Validation model for admin login request."""

    model_config = ConfigDict(str_strip_whitespace=True)

    username: StrictStr = Field(..., min_length=1, max_length=100)
    password: StrictStr = Field(..., min_length=1, max_length=200)


class AdminLoginResponse(BaseModel):
    success: bool = True
    message: str
