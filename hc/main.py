"""
HC - FastAPI Application Entry Point

A local HTTP client: proxies requests on behalf of the browser UI and
keeps named requests and folders in a SQLite database.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from .config import Settings, get_settings
from .database import build_engine, init_db, make_session_factory
from .exceptions import register_exception_handlers
from .logger import get_logger
from .middleware import OriginValidatorMiddleware, RequestLoggingMiddleware
from .routers import folders, proxy, requests
from .services.proxy_executor import ProxyExecutor
from .services.store import PersistenceStore

__version__ = "1.0.0"

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, check_origin: bool = False) -> FastAPI:
    """
    Build the HC application.

    Args:
        settings: Configuration; the process-wide settings when omitted
        check_origin: Reject API calls from origins other than the local server

    Returns:
        FastAPI: Application whose store and executor are created at startup
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Open the database and build the shared components."""
        db_path = settings.database_path()
        logger.info("Opening database: %s", db_path)

        engine = build_engine(db_path)
        init_db(engine)

        app.state.store = PersistenceStore(
            make_session_factory(engine),
            get_logger("hc.storage"),
        )
        app.state.executor = ProxyExecutor()
        app.state.proxy_logger = get_logger("hc.proxy")
        logger.info("Database initialized successfully")

        yield

        engine.dispose()

    app = FastAPI(
        title="HC",
        description="A browser-based HTTP client backed by a local server",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan
    )

    # Last added runs first, so logging also sees rejected origins
    if check_origin:
        app.add_middleware(OriginValidatorMiddleware, port=settings.port)
    app.add_middleware(RequestLoggingMiddleware)

    register_exception_handlers(app)

    @app.get("/api")
    async def root():
        """API information."""
        return {
            "name": "HC",
            "version": __version__,
            "docs": "/docs"
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    app.include_router(proxy.router)
    app.include_router(requests.router)
    app.include_router(folders.router)

    if settings.frontend_dir is not None and settings.frontend_dir.is_dir():
        app.mount("/", StaticFiles(directory=settings.frontend_dir, html=True), name="frontend")
    elif settings.frontend_dir is not None:
        logger.warning("Frontend directory not found, UI will not be served: %s", settings.frontend_dir)

    return app


# Served as `uvicorn hc.main:app`; same origin rules as `hc serve`
app = create_app(check_origin=True)
