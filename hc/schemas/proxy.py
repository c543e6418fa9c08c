"""
Pydantic schemas for proxy execution.

Defines the inbound description of a live request and the normalized
result returned to the UI.
"""

from pydantic import BaseModel, Field, field_validator


class ProxyRequest(BaseModel):
    """Schema for a request to be executed once, without saving it."""
    method: str = ""
    url: str = ""
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


class ProxyResponse(BaseModel):
    """
    Schema for a proxied response.

    ``duration`` is the network round trip in whole milliseconds. Repeated
    response headers are joined into one value with ``", "``.
    """
    status_code: int
    headers: dict[str, str]
    body: str
    duration: int

    @property
    def duration_ms(self) -> int:
        return self.duration
