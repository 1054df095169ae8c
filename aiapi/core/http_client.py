"""
Shared HTTP client and the adapter that hands a RequestSpec to httpx.

This is the transport collaborator: it sends exactly once and returns the raw
httpx.Response. Response parsing and retries are left to the caller.
"""
import logging
import httpx
from typing import Optional

from .config import API_TIMEOUT, READ_TIMEOUT, MAX_CONNECTIONS
from ..models.api_models import RequestSpec

logger = logging.getLogger("AiAPI.Core.HTTPClient")

_http_client: Optional[httpx.AsyncClient] = None


def get_http_client() -> httpx.AsyncClient:
    """
    Return the process-wide AsyncClient, creating it on first use.

    - limits: connection pool sized from MAX_CONNECTIONS
    - timeout: API_TIMEOUT overall, READ_TIMEOUT for reads
    - http2: enabled when the server supports it
    """
    global _http_client

    if _http_client is None:
        logger.info("Initializing global HTTP client")
        _http_client = httpx.AsyncClient(
            limits=httpx.Limits(
                max_connections=MAX_CONNECTIONS,
                max_keepalive_connections=50,
                keepalive_expiry=120.0
            ),
            timeout=httpx.Timeout(API_TIMEOUT, read=READ_TIMEOUT),
            follow_redirects=True,
            http2=True
        )

    return _http_client


async def close_http_client():
    """Close the shared client (call on shutdown)."""
    global _http_client

    if _http_client is not None:
        logger.info("Closing global HTTP client")
        await _http_client.aclose()
        _http_client = None


def build_httpx_request(spec: RequestSpec) -> httpx.Request:
    return httpx.Request(
        spec.http_method,
        spec.url,
        headers=spec.headers,
        content=spec.body,
    )


async def send_request_spec(spec: RequestSpec, client: Optional[httpx.AsyncClient] = None) -> httpx.Response:
    """
    Send a prepared request once and return the untouched response.

    Transport errors raised by httpx propagate to the caller.
    """
    http_client = client or get_http_client()
    request = build_httpx_request(spec)
    logger.debug(f"Dispatching {spec.http_method} {spec.url}")
    return await http_client.send(request)
