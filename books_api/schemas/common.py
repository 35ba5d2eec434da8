"""Common Pydantic schemas."""
from typing import Union

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(from_attributes=True)


class MessageResponse(BaseModel):
    """Simple message response."""

    message: str


class ErrorDetail(BaseModel):
    """Error payload: one message, or a list of validation violations."""

    message: Union[str, list[str]]


class ErrorResponse(BaseModel):
    """Error response schema."""

    error: ErrorDetail


class StatusResponse(BaseModel):
    """Status response schema."""

    status: str
    app: str
