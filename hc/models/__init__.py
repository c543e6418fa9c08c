"""
Models package for HC.

Exports all SQLAlchemy models for database operations.
"""

from .folder import Folder
from .request import Request

__all__ = [
    "Folder",
    "Request",
]
