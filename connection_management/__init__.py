"""
Connection Management Module

This module provides the transport side of Elastic operations:

- ElasticClient: the shared, concurrency-safe handle wrapping httpx.AsyncClient
- TransportResponse: raw status, headers and body of one HTTP exchange
- uritemplates: path template expansion with path-segment escaping
- JSONDecoder: decoding of raw bodies into typed Pydantic results
- Transport exception types

Retry, backoff and pooling policy live in httpx and the caller; this module
performs exactly one request per call.
"""

from .client import ElasticClient, HeaderTypes, TransportResponse
from .decoder import JSONDecoder
from .uritemplates import expand, escape_segment
from .connection_exceptions import (
    ConnectionError,
    ConnectionTimeoutError,
    ConnectionClosedError,
    ElasticHTTPError,
)

__all__ = [
    'ElasticClient',
    'TransportResponse',
    'HeaderTypes',
    'JSONDecoder',
    'expand',
    'escape_segment',
    'ConnectionError',
    'ConnectionTimeoutError',
    'ConnectionClosedError',
    'ElasticHTTPError',
]
