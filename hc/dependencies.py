"""
FastAPI dependencies for HC.

The store, executor and proxy logger are built once at startup and kept on
app.state.
Tests replace them through ``app.dependency_overrides``.
"""

import logging

from fastapi import Request

from .services.proxy_executor import ProxyExecutor
from .services.store import PersistenceStore


def get_store(request: Request) -> PersistenceStore:
    """
    Dependency function returning the application's persistence store.

    Usage:
        @router.get("/folders")
        def list_folders(store: PersistenceStore = Depends(get_store)):
            ...
    """
    return request.app.state.store


def get_executor(request: Request) -> ProxyExecutor:
    """Dependency function returning the application's proxy executor."""
    return request.app.state.executor


def get_proxy_logger(request: Request) -> logging.Logger:
    """Dependency function returning the logger handed to the proxy route."""
    return request.app.state.proxy_logger
