"""Common Pydantic schemas shared across the API."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for response bodies; snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ErrorResponse(BaseModel):
    """Standardized error envelope."""

    success: bool = False
    message: str
    error_code: str | None = None
    errors: list[str] | None = None
    error: str | None = None


class MessageResponse(BaseModel):
    """Simple message response."""

    success: bool = True
    message: str
