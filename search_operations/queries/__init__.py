"""
Query Builders

Concrete Query implementations. Each one renders a single wire document
through source() and can be nested inside any query that accepts filters.
"""

from .knn import KnnQuery
from .term import TermQuery
from .match_all import MatchAllQuery
from .raw import RawQuery

__all__ = [
    "KnnQuery",
    "TermQuery",
    "MatchAllQuery",
    "RawQuery",
]
