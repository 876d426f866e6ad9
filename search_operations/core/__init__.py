"""
Core Search Operations Module

This module provides the core infrastructure for search operations,
including the query contract, the service base class, result models
and exceptions.
"""

from .base import Query, BaseService, source_of, encode_json
from .result import SearchResult, SearchHits, SearchHit, TotalHits, ShardsInfo
from .search_ops_exceptions import (
    SearchError,
    InvalidSearchParametersError,
    QueryEncodingError,
    SearchTimeoutError,
    SearchResultDecodeError,
)

__all__ = [
    # Base classes
    "Query",
    "BaseService",
    "source_of",
    "encode_json",

    # Results
    "SearchResult",
    "SearchHits",
    "SearchHit",
    "TotalHits",
    "ShardsInfo",

    # Exceptions
    "SearchError",
    "InvalidSearchParametersError",
    "QueryEncodingError",
    "SearchTimeoutError",
    "SearchResultDecodeError",
]
