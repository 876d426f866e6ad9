"""
Elastic Operations Exceptions

This module defines custom exceptions for the Elastic_Ops package
to provide clear error handling and reporting.

Errors fall into four families that callers can tell apart:
- EncodingError: a query or parameter could not be serialized
- PathResolutionError: a request path template could not be expanded
- TransportError: the HTTP round trip itself failed
- DecodeError: a response arrived but did not match the expected shape
"""


class ElasticOpsError(Exception):
    """Base exception for all Elastic_Ops errors"""
    pass


class ConfigurationError(ElasticOpsError):
    """Raised when configuration is invalid or missing"""
    pass


class EncodingError(ElasticOpsError):
    """Raised when a query document or request parameter cannot be serialized"""
    pass


class PathResolutionError(ElasticOpsError):
    """Raised when a request path template cannot be expanded"""
    pass


class TransportError(ElasticOpsError):
    """Raised when the HTTP request to the search engine fails"""
    pass


class DecodeError(ElasticOpsError):
    """Raised when a response body does not match the expected result shape"""
    pass


class QueryError(ElasticOpsError):
    """Raised when a query operation fails"""
    pass
