"""Common schema utilities."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


class ErrorResponse(BaseModel):
    """Body of an unhandled server error."""

    error: str
    detail: str | None = None
    timestamp: datetime = Field(default_factory=datetime.now)
