"""
Term Query

Matches documents whose field contains the exact term.
"""

from typing import Any, Dict, Optional

from ..core.base import Query


class TermQuery(Query):
    """
    Exact-term query.

    Renders the short form ``{"term": {name: value}}`` unless a boost or
    query name is set, in which case the value moves into an object.
    """

    def __init__(self, name: str, value: Any):
        self._name = name
        self._value = value
        self._boost: Optional[float] = None
        self._case_insensitive: Optional[bool] = None
        self._query_name: Optional[str] = None

    def boost(self, boost: Optional[float]) -> "TermQuery":
        self._boost = boost
        return self

    def case_insensitive(self, case_insensitive: bool) -> "TermQuery":
        self._case_insensitive = case_insensitive
        return self

    def query_name(self, query_name: str) -> "TermQuery":
        """Name reported back in matched_queries of each hit."""
        self._query_name = query_name
        return self

    def source(self) -> Dict[str, Any]:
        if self._boost is None and self._case_insensitive is None and self._query_name is None:
            return {"term": {self._name: self._value}}

        params: Dict[str, Any] = {"value": self._value}
        if self._boost is not None:
            params["boost"] = self._boost
        if self._case_insensitive is not None:
            params["case_insensitive"] = self._case_insensitive
        if self._query_name is not None:
            params["_name"] = self._query_name
        return {"term": {self._name: params}}
