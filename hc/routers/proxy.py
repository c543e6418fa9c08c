"""
Proxy execution API route.

Validates a live request description and executes it once. Results are
returned to the caller and never persisted.
"""

import logging

from fastapi import APIRouter, Depends

from ..dependencies import get_executor, get_proxy_logger
from ..exceptions import ErrorResponse
from ..schemas.proxy import ProxyRequest, ProxyResponse
from ..services.proxy_executor import ProxyExecutor
from ..services.validation import validate_proxy_request


router = APIRouter(prefix="/api", tags=["proxy"])


@router.post(
    "/request",
    response_model=ProxyResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid URL or method"},
        500: {"model": ErrorResponse, "description": "Timeout, network or transport failure"},
    }
)
async def proxy_request(
    request: ProxyRequest,
    executor: ProxyExecutor = Depends(get_executor),
    logger: logging.Logger = Depends(get_proxy_logger)
):
    """
    Execute a temporary (unsaved) HTTP request.

    Args:
        request: Method, URL, headers and body to send
        executor: Proxy executor
        logger: Logger built at startup for proxy activity

    Returns:
        ProxyResponse with status, flattened headers, body and duration
    """
    validate_proxy_request(request)

    result = await executor.execute_request(request)
    logger.info(
        "Proxied %s %s -> %d in %d ms",
        request.method.upper(),
        request.url,
        result.status_code,
        result.duration,
    )
    return result
