"""
Pydantic schemas package.

Exports all schemas for API request/response validation.
"""

from .request import (
    RequestBase,
    RequestCreate,
    RequestUpdate,
    RequestResponse,
)

from .folder import (
    FolderBase,
    FolderCreate,
    FolderUpdate,
    FolderResponse,
)

from .proxy import (
    ProxyRequest,
    ProxyResponse,
)

__all__ = [
    # Request schemas
    "RequestBase",
    "RequestCreate",
    "RequestUpdate",
    "RequestResponse",
    # Folder schemas
    "FolderBase",
    "FolderCreate",
    "FolderUpdate",
    "FolderResponse",
    # Proxy schemas
    "ProxyRequest",
    "ProxyResponse",
]
