"""
Search Operations Module

This module provides query construction and request execution for the
search engine's HTTP API:
- The Query contract and concrete query builders (KNN, term, match_all, raw)
- Request services that turn builder state into a path, query-string
  parameters and a JSON body
- Typed search results decoded from the engine's response
- Search-specific exceptions
"""

# Core exports
from .core import (
    Query,
    BaseService,
    SearchResult,
    SearchHits,
    SearchHit,
    TotalHits,
    ShardsInfo,
    SearchError,
    InvalidSearchParametersError,
    QueryEncodingError,
    SearchTimeoutError,
    SearchResultDecodeError,
)

# Query exports
from .queries import (
    KnnQuery,
    TermQuery,
    MatchAllQuery,
    RawQuery,
)

# Service exports
from .services import (
    SearchTemplateService,
    SearchTemplateBody,
)

__all__ = [
    # Core
    "Query",
    "BaseService",
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

    # Queries
    "KnnQuery",
    "TermQuery",
    "MatchAllQuery",
    "RawQuery",

    # Services
    "SearchTemplateService",
    "SearchTemplateBody",
]
