"""
Connection Management Exceptions

This module defines specialized exceptions for the HTTP transport used to
reach the search engine, providing detailed error reporting for
connection-related issues.

All of them derive from TransportError so that callers can separate a failed
round trip from encoding, path-resolution and decode failures.
"""

from typing import Optional

import httpx

from elastic_ops_exceptions import TransportError


class ConnectionError(TransportError):
    """
    Base exception for all connection-related errors.

    Raised directly when the request never produced an HTTP response
    (refused connection, DNS failure, protocol error).
    """
    pass


class ConnectionTimeoutError(ConnectionError):
    """
    Raised when the transport gives up waiting for the server.

    Covers connect, read, write and pool timeouts reported by httpx.
    """
    pass


class ConnectionClosedError(ConnectionError):
    """
    Raised when attempting to use a client that has already been closed.
    """
    pass


class ElasticHTTPError(TransportError):
    """
    Raised when the engine answers with a non-success status code.

    Attributes:
        status_code: HTTP status returned by the engine
        reason: Error reason extracted from the engine's error document, if any
        error_type: Error type extracted from the engine's error document, if any
        header: Response headers
        body: Raw response body
    """
    def __init__(
        self,
        message: str,
        status_code: int,
        reason: Optional[str] = None,
        error_type: Optional[str] = None,
        header: Optional[httpx.Headers] = None,
        body: bytes = b"",
    ):
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason
        self.error_type = error_type
        self.header = header
        self.body = body
