"""
Base Search Operations

This module provides the two abstractions every search building block
derives from:

- Query: any search predicate that can render itself as a wire document
- BaseService: a chainable request builder that resolves a path and
  query-string parameters, sends one request through the shared client
  and decodes the response
"""

import asyncio
import json
import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Tuple, TypeVar, Generic

import httpx

from connection_management import ElasticClient, HeaderTypes, TransportResponse
from .search_ops_exceptions import QueryEncodingError, SearchTimeoutError

logger = logging.getLogger(__name__)

# Type variable for the service result
R = TypeVar('R')


class Query(ABC):
    """
    Abstract base class for all queries.

    A query renders itself into a document: nested dicts, lists and scalars
    ready for JSON encoding. Key order carries no meaning; list order does.
    """

    @abstractmethod
    def source(self) -> Any:
        """
        Build the wire document for this query.

        Returns:
            Nested dict/list/scalar document

        Raises:
            QueryEncodingError: If the query cannot be serialized
        """
        pass


def source_of(query: Any) -> Any:
    """
    Render a nested query, rejecting values that are not queries.

    Raises:
        QueryEncodingError: If ``query`` is not a Query or fails to render
    """
    if not isinstance(query, Query):
        raise QueryEncodingError(f"Expected a Query, got {type(query).__name__}")
    return query.source()


def encode_json(value: Any) -> str:
    """
    Compact, key-sorted JSON text for transport inside a single parameter.

    Raises:
        QueryEncodingError: If the value holds something JSON cannot represent
    """
    try:
        return json.dumps(
            value,
            separators=(",", ":"),
            sort_keys=True,
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError) as e:
        raise QueryEncodingError(f"Failed to encode value as JSON: {e}") from e


def bool_text(value: bool) -> str:
    return "true" if value else "false"


class BaseService(Generic[R], ABC):
    """
    Abstract base class for request services.

    Holds the diagnostic flags and headers every endpoint accepts, and the
    execution skeleton subclasses build on: validate, build_url, send.
    A service is owned by one caller; it keeps no state between calls to
    do(), so re-running it sends an identical, independent request.
    """

    def __init__(self, client: ElasticClient):
        """
        Initialize the service.

        Args:
            client: Shared client used only to perform the final request
        """
        self._client = client

        defaults = client.config.search
        self._pretty: Optional[bool] = defaults.pretty
        self._human: Optional[bool] = defaults.human
        self._error_trace: Optional[bool] = defaults.error_trace
        self._filter_path: List[str] = []
        self._headers: Optional[List[Tuple[str, str]]] = None

    def pretty(self, pretty: bool):
        """Ask the engine for an indented JSON response."""
        self._pretty = pretty
        return self

    def human(self, human: bool):
        """Ask for human readable values in the response, e.g. "7.5mb"."""
        self._human = human
        return self

    def error_trace(self, error_trace: bool):
        """Include the stack trace of returned errors."""
        self._error_trace = error_trace
        return self

    def filter_path(self, *filter_path: str):
        """Filters used to reduce the response."""
        self._filter_path = list(filter_path)
        return self

    def header(self, name: str, value: str):
        """Add a header to the request. Repeated names keep every value."""
        if self._headers is None:
            self._headers = []
        self._headers.append((name, value))
        return self

    def headers(self, headers: Optional[HeaderTypes]):
        """
        Replace all request headers.

        Accepts a mapping, an httpx.Headers (every value of a repeated name is
        kept) or a sequence of (name, value) pairs. None clears them.
        """
        if headers is None:
            self._headers = None
        elif isinstance(headers, httpx.Headers):
            self._headers = headers.multi_items()
        elif isinstance(headers, Mapping):
            self._headers = list(headers.items())
        else:
            self._headers = [(name, value) for name, value in headers]
        return self

    def validate(self) -> None:
        """
        Pre-flight checks run before anything is built or sent.

        Raises:
            InvalidSearchParametersError: If the service is misconfigured
        """
        return None

    @abstractmethod
    def build_url(self) -> Tuple[str, Dict[str, str]]:
        """
        Resolve the request path and query-string parameters.

        Returns:
            Tuple of (path, parameters)
        """
        pass

    @abstractmethod
    async def do(self, timeout: Optional[float] = None) -> R:
        """Execute the request and return the decoded result."""
        pass

    def _common_params(self) -> Dict[str, str]:
        """Parameters shared by every endpoint; unset flags are left out"""
        params = {"format": "json"}
        if self._pretty is not None:
            params["pretty"] = bool_text(self._pretty)
        if self._human is not None:
            params["human"] = bool_text(self._human)
        if self._error_trace is not None:
            params["error_trace"] = bool_text(self._error_trace)
        if self._filter_path:
            params["filter_path"] = ",".join(self._filter_path)
        return params

    async def _perform(
        self,
        method: str,
        path: str,
        params: Dict[str, str],
        body: Optional[bytes],
        timeout: Optional[float],
    ) -> TransportResponse:
        """
        Send the request through the shared client.

        Cancellation propagates untouched. When a timeout is given and
        expires, SearchTimeoutError is raised.
        """
        request = self._client.perform_request(
            method=method,
            path=path,
            params=params,
            body=body,
            headers=self._headers,
        )
        try:
            if timeout is None:
                return await request
            return await asyncio.wait_for(request, timeout)
        except asyncio.TimeoutError as e:
            logger.warning(f"{method} {path} timed out after {timeout} seconds")
            raise SearchTimeoutError(f"{method} {path} timed out after {timeout} seconds") from e
        except asyncio.CancelledError:
            logger.debug(f"{method} {path} cancelled")
            raise
