"""
Shared schema bases.

The API speaks camelCase on the wire (profileImage, scheduledAt, ...)
while Python code uses snake_case. Requests accept either spelling.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for request/response schemas with camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(BaseModel):
    """Schema for simple message responses"""
    message: str

    model_config = ConfigDict(
        json_schema_extra={"example": {"message": "Idea liked successfully"}}
    )


class ErrorResponse(BaseModel):
    """Schema for error responses"""
    message: str

    model_config = ConfigDict(
        json_schema_extra={"example": {"message": "Invalid data"}}
    )
