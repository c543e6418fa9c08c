"""
Pydantic schemas for folders.

Defines schemas for creating, updating, and returning folder data.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class FolderBase(BaseModel):
    """Base schema with common folder fields."""
    name: str
    parent_id: int | None = None


class FolderCreate(FolderBase):
    """Schema for creating a new folder."""
    pass


class FolderUpdate(FolderBase):
    """Schema for replacing a folder's name and parent."""
    pass


class FolderResponse(FolderBase):
    """Schema for folder response with all fields."""
    id: int
    parent_id: int | None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
