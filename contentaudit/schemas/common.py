"""
Common Pydantic schemas used across the API.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """Base schema: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class ErrorResponse(BaseSchema):
    """Error response."""

    detail: str


class HealthResponse(BaseSchema):
    """Health check response."""

    status: str
    version: str
