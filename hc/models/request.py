"""
Request model for storing named HTTP requests.

Headers are kept as JSON text; encoding and decoding belong to the store.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column

from ..database import Base, utcnow


class Request(Base):
    """
    SQLAlchemy model for saved HTTP requests.

    Attributes:
        id: Unique identifier for the request
        name: Human-readable name for the request
        folder_id: Optional reference to parent folder, cleared on folder delete
        method: HTTP method, stored as given
        url: Target URL
        headers: JSON object text mapping header names to values
        body: Raw request body
        created_at: Timestamp when the request was created
        updated_at: Timestamp when the request was last updated
    """
    __tablename__ = "requests"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(Text)
    folder_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("folders.id", ondelete="SET NULL"),
        nullable=True
    )
    method: Mapped[str] = mapped_column(Text)
    url: Mapped[str] = mapped_column(Text)
    headers: Mapped[Optional[str]] = mapped_column(Text, nullable=True, default="{}")
    body: Mapped[Optional[str]] = mapped_column(Text, nullable=True, default="")
    created_at: Mapped[datetime] = mapped_column(default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(default=utcnow)
