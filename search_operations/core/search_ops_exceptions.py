"""
Search Operations Exceptions

This module defines custom exceptions for search operations,
providing clear error handling and reporting for search-related issues.

Each search exception also derives from the package-wide category it belongs
to (encoding, transport, decode), so callers can catch either the search
family or the category.
"""

from typing import Any, Optional

from elastic_ops_exceptions import QueryError, EncodingError, TransportError, DecodeError


class SearchError(QueryError):
    """Base exception for all search-related errors"""
    pass


class InvalidSearchParametersError(SearchError):
    """Raised when a service fails its pre-flight validation"""
    pass


class QueryEncodingError(SearchError, EncodingError):
    """Raised when a query or request parameter cannot be serialized"""
    pass


class SearchTimeoutError(SearchError, TransportError):
    """Raised when a search request does not complete within its timeout"""
    pass


class SearchResultDecodeError(SearchError, DecodeError):
    """
    Raised when the engine responded but the body did not decode.

    The transport headers are still available so callers can inspect
    version or rate-limit information on a malformed body.

    Attributes:
        result: Partially constructed result carrying the response headers
        header: Response headers
    """
    def __init__(self, message: str, result: Any = None, header: Optional[Any] = None):
        super().__init__(message)
        self.result = result
        self.header = header
