"""
Elastic Client

This module provides the shared client handle used by every query service.
It owns a single httpx.AsyncClient configured from ElasticSettings and
exposes one primitive, perform_request, which sends exactly one HTTP request
and hands back the raw response.

The client carries no per-request state, so any number of service builders
may share it concurrently.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Sequence, Tuple, Union

import httpx

from config import ElasticSettings, load_settings
from .connection_exceptions import (
    ConnectionError,
    ConnectionTimeoutError,
    ConnectionClosedError,
    ElasticHTTPError,
)
from .decoder import JSONDecoder

logger = logging.getLogger(__name__)

HeaderTypes = Union[Mapping[str, str], Sequence[Tuple[str, str]], httpx.Headers]


@dataclass
class TransportResponse:
    """
    Raw response returned by the transport.

    Attributes:
        status_code: HTTP status code
        header: Response headers
        body: Undecoded response body
    """
    status_code: int
    header: httpx.Headers = field(default_factory=httpx.Headers)
    body: bytes = b""


class ElasticClient:
    """
    Shared client handle for the search engine's HTTP API.

    Usage:
        async with ElasticClient() as client:
            result = await client.search_template().index("docs").id("tpl").do()
    """

    def __init__(
        self,
        config: Optional[ElasticSettings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        decoder: Optional[JSONDecoder] = None,
    ):
        """
        Initialize the client.

        Args:
            config: ElasticSettings object. If None, default settings are loaded.
            transport: Optional httpx transport, e.g. httpx.MockTransport in tests
            decoder: Decoder used by services to parse response bodies
        """
        self.config = config if config is not None else load_settings()
        self.decoder = decoder if decoder is not None else JSONDecoder()
        self._closed = False

        conn = self.config.connection
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        headers.update(conn.headers)

        auth = None
        if conn.api_key:
            headers["Authorization"] = f"ApiKey {conn.api_key}"
        elif conn.username:
            auth = httpx.BasicAuth(conn.username, conn.password)

        self._http = httpx.AsyncClient(
            base_url=conn.url,
            headers=headers,
            auth=auth,
            timeout=conn.timeout,
            verify=conn.verify_certs,
            transport=transport,
        )

        logger.info(f"ElasticClient initialized for {conn.url}")

    @property
    def closed(self) -> bool:
        return self._closed

    async def perform_request(
        self,
        method: str,
        path: str,
        params: Optional[Mapping[str, str]] = None,
        body: Optional[bytes] = None,
        headers: Optional[HeaderTypes] = None,
    ) -> TransportResponse:
        """
        Send a single HTTP request to the engine.

        No retries are attempted; the outcome of exactly one request is
        returned or raised.

        Args:
            method: HTTP method
            path: Resource path relative to the configured base URL, already escaped
            params: Query string parameters
            body: Encoded request body
            headers: Extra headers for this request only

        Returns:
            TransportResponse with status, headers and raw body

        Raises:
            ConnectionClosedError: If the client has been closed
            ConnectionTimeoutError: If the transport timed out
            ConnectionError: If no response was received
            ElasticHTTPError: If the engine returned a non-success status
        """
        if self._closed:
            raise ConnectionClosedError("ElasticClient is closed")

        url = "/" + path.lstrip("/")
        if self.config.monitoring.log_requests:
            logger.debug(f"{method} {url} params={dict(params or {})}")

        try:
            response = await self._http.request(
                method,
                url,
                params=params,
                content=body,
                headers=headers,
            )
        except httpx.TimeoutException as e:
            logger.error(f"{method} {url} timed out: {e}")
            raise ConnectionTimeoutError(f"{method} {url} timed out: {e}") from e
        except httpx.HTTPError as e:
            logger.error(f"{method} {url} failed: {e}")
            raise ConnectionError(f"{method} {url} failed: {e}") from e

        if not response.is_success:
            reason, error_type = _error_details(response)
            logger.warning(f"{method} {url} returned {response.status_code}: {reason or 'no reason given'}")
            raise ElasticHTTPError(
                f"{method} {url} returned {response.status_code}"
                + (f": {reason}" if reason else ""),
                status_code=response.status_code,
                reason=reason,
                error_type=error_type,
                header=response.headers,
                body=response.content,
            )

        return TransportResponse(
            status_code=response.status_code,
            header=response.headers,
            body=response.content,
        )

    def search_template(self):
        """Create a SearchTemplateService bound to this client."""
        from search_operations.services import SearchTemplateService
        return SearchTemplateService(self)

    async def close(self) -> None:
        """Close the underlying HTTP client and release its connections"""
        if self._closed:
            return
        await self._http.aclose()
        self._closed = True
        logger.info("ElasticClient closed")

    async def __aenter__(self) -> "ElasticClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


def _error_details(response: httpx.Response) -> Tuple[Optional[str], Optional[str]]:
    """Extract reason and type from the engine's error document, if present"""
    try:
        payload: Any = response.json()
    except ValueError:
        return None, None
    if not isinstance(payload, dict):
        return None, None
    error = payload.get("error")
    if isinstance(error, dict):
        return error.get("reason"), error.get("type")
    if isinstance(error, str):
        return error, None
    return None, None
