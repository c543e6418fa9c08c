"""
Error taxonomy and HTTP error handling for HC.

Every failure raised by the store, the proxy executor or the validation
helpers is an ``HCError`` subclass. The adapter layer renders all of them
with the same ``{"messages": [...]}`` shape.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException


class ErrorResponse(BaseModel):
    """Standard error response format."""
    messages: list[str]

    @classmethod
    def from_message(cls, message: str) -> "ErrorResponse":
        return cls(messages=[message])

    @classmethod
    def from_messages(cls, messages: list[str]) -> "ErrorResponse":
        return cls(messages=list(messages))


class HCError(Exception):
    """Base exception for HC errors."""

    def __init__(
        self,
        messages: str | list[str],
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
    ):
        if isinstance(messages, str):
            messages = [messages]
        self.messages = list(messages)
        self.status_code = status_code
        super().__init__("; ".join(self.messages))

    @property
    def message(self) -> str:
        return self.messages[0] if self.messages else ""


class NotFoundError(HCError):
    """Raised when a point lookup or mutation matches no row."""

    def __init__(self, entity: str):
        self.entity = entity
        super().__init__(
            f"{entity} not found",
            status_code=status.HTTP_404_NOT_FOUND,
        )


class ValidationError(HCError):
    """Raised for rejected input and for malformed stored header JSON."""

    def __init__(self, messages: str | list[str]):
        super().__init__(messages, status_code=status.HTTP_400_BAD_REQUEST)


class StorageError(HCError):
    """Raised when the storage engine fails (connectivity, constraints, disk)."""

    def __init__(self, detail: str, cause: BaseException | None = None):
        self.cause = cause
        if cause is not None:
            detail = f"{detail}: {cause}"
        super().__init__(detail, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


class ProxyError(HCError):
    """Base exception for failures of an outbound proxied request."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(detail, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


class TimeoutError(ProxyError):
    """Raised when an outbound request exceeds its time limit."""

    def __init__(self, detail: str = "request timed out"):
        super().__init__(detail)


class NetworkError(ProxyError):
    """Raised on DNS, connection, TLS or read failures."""


class TransportError(ProxyError):
    """Raised when the outbound request cannot be constructed or sent as given."""


async def hc_exception_handler(request: Request, exc: HCError) -> JSONResponse:
    """Handler for HC errors."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse.from_messages(exc.messages).model_dump(),
    )


async def proxy_exception_handler(request: Request, exc: ProxyError) -> JSONResponse:
    """Handler for proxy errors, wrapped with a descriptive prefix."""
    messages = [f"Failed to execute request: {message}" for message in exc.messages]
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse.from_messages(messages).model_dump(),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handler for Pydantic validation errors, one message per failing field."""
    messages = []
    for error in exc.errors():
        loc = " -> ".join(str(l) for l in error["loc"])
        messages.append(f"{loc}: {error['msg']}")

    if not messages:
        messages = ["invalid request body"]

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse.from_messages(messages).model_dump(),
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Handler for routing errors such as unknown paths or wrong verbs."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse.from_message(str(exc.detail)).model_dump(),
        headers=getattr(exc, "headers", None),
    )


async def sqlalchemy_exception_handler(
    request: Request, exc: SQLAlchemyError
) -> JSONResponse:
    """Handler for SQLAlchemy errors that escaped the store."""
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse.from_message("database error occurred").model_dump(),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI application."""
    app.add_exception_handler(ProxyError, proxy_exception_handler)
    app.add_exception_handler(HCError, hc_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_exception_handler)
