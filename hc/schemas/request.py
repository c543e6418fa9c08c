"""
Pydantic schemas for saved HTTP requests.

Headers are always a mapping on the wire: an omitted or null ``headers``
field becomes ``{}``, and an omitted or null ``body`` becomes ``""``.
"""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator


class RequestBase(BaseModel):
    """Base schema with common request fields."""
    name: str
    folder_id: int | None = None
    method: str
    url: str
    headers: dict[str, str] = Field(default_factory=dict)
    body: str = ""

    @field_validator("headers", mode="before")
    @classmethod
    def headers_default(cls, value):
        return {} if value is None else value

    @field_validator("body", mode="before")
    @classmethod
    def body_default(cls, value):
        return "" if value is None else value


class RequestCreate(RequestBase):
    """Schema for creating a new request."""
    pass


class RequestUpdate(RequestBase):
    """Schema for replacing every editable field of a request."""
    pass


class RequestResponse(RequestBase):
    """Schema for request response with all fields including system-generated ones."""
    id: int
    folder_id: int | None
    created_at: datetime
    updated_at: datetime
