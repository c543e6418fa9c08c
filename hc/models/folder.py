"""
Folder model for organizing requests.

Folders can be nested inside other folders.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column

from ..database import Base, utcnow


class Folder(Base):
    """
    SQLAlchemy model for folders.

    Deleting a folder cascades to its sub-folders; requests inside it are
    kept with their ``folder_id`` cleared. Both rules live in the schema.

    Attributes:
        id: Unique identifier for the folder
        name: Human-readable name for the folder
        parent_id: Optional reference to parent folder (for nesting)
        created_at: Timestamp when the folder was created
        updated_at: Timestamp when the folder was last updated
    """
    __tablename__ = "folders"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(Text)
    parent_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("folders.id", ondelete="CASCADE"),
        nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(default=utcnow)
