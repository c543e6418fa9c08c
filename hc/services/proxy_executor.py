"""
Proxy execution service for sending one outbound HTTP request.

This service performs the live call using httpx and normalizes the
result: status code, flattened headers, body text and elapsed time.
Nothing is retried and nothing is persisted.
"""

import asyncio
import time
from collections.abc import Mapping

import httpx

from .. import exceptions
from ..schemas.proxy import ProxyRequest, ProxyResponse


# Fixed limit for a whole outbound call, in seconds
REQUEST_TIMEOUT = 30.0

DEFAULT_CONTENT_TYPE = "application/json"


def flatten_headers(headers: httpx.Headers) -> dict[str, str]:
    """
    Collapse response headers into one string per name.

    Repeated headers are joined with ``", "`` in arrival order. Names keep
    the casing of their first occurrence.
    """
    flattened: dict[str, str] = {}
    names: dict[str, str] = {}

    for raw_key, raw_value in headers.raw:
        key = raw_key.decode(headers.encoding)
        value = raw_value.decode(headers.encoding)
        name = names.setdefault(key.lower(), key)
        if name in flattened:
            flattened[name] = f"{flattened[name]}, {value}"
        else:
            flattened[name] = value

    return flattened


def build_outbound_headers(headers: Mapping[str, str], body: str) -> httpx.Headers:
    """Apply the caller's headers, defaulting Content-Type when a body is sent."""
    outbound = httpx.Headers()
    for key, value in headers.items():
        outbound[key] = value

    if body and "content-type" not in outbound:
        outbound["Content-Type"] = DEFAULT_CONTENT_TYPE

    return outbound


class ProxyExecutor:
    """
    Executes proxied requests.

    Holds no state across calls; a fresh client is opened for every call.
    ``transport`` replaces the network layer and exists for tests.
    """

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None):
        self._transport = transport

    async def execute(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str] | None = None,
        body: str = "",
    ) -> ProxyResponse:
        """
        Perform one HTTP call and return its normalized result.

        Redirects are followed; the result describes the final response.

        Raises:
            exceptions.TimeoutError: the call took longer than REQUEST_TIMEOUT
            exceptions.NetworkError: DNS, connection, TLS or read failure
            exceptions.TransportError: the request could not be built or sent as given
        """
        async with httpx.AsyncClient(
            timeout=REQUEST_TIMEOUT,
            follow_redirects=True,
            transport=self._transport,
        ) as client:
            try:
                request = client.build_request(
                    method=method,
                    url=url,
                    headers=build_outbound_headers(headers or {}, body),
                    content=body.encode("utf-8") if body else None,
                )
            except (httpx.InvalidURL, httpx.UnsupportedProtocol, ValueError, TypeError) as e:
                raise exceptions.TransportError(f"invalid request: {e}") from e

            start_time = time.perf_counter()
            response = await self._send(client, request)
            end_time = time.perf_counter()

        return ProxyResponse(
            status_code=response.status_code,
            headers=flatten_headers(response.headers),
            body=response.text,
            duration=int((end_time - start_time) * 1000),
        )

    async def execute_request(self, request: ProxyRequest) -> ProxyResponse:
        """Execute a ProxyRequest as received from the UI."""
        return await self.execute(
            method=request.method,
            url=request.url,
            headers=request.headers,
            body=request.body,
        )

    async def _send(self, client: httpx.AsyncClient, request: httpx.Request) -> httpx.Response:
        try:
            return await asyncio.wait_for(client.send(request), timeout=REQUEST_TIMEOUT)
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            raise exceptions.TimeoutError(
                f"request exceeded {REQUEST_TIMEOUT:.0f} seconds timeout"
            ) from e
        except (
            httpx.InvalidURL,
            httpx.UnsupportedProtocol,
            httpx.LocalProtocolError,
            httpx.TooManyRedirects,
        ) as e:
            raise exceptions.TransportError(str(e) or type(e).__name__) from e
        except httpx.HTTPError as e:
            raise exceptions.NetworkError(str(e) or type(e).__name__) from e
