"""
Match All Query
"""

from typing import Any, Dict, Optional

from ..core.base import Query


class MatchAllQuery(Query):
    """Matches every document, optionally with a constant score boost."""

    def __init__(self):
        self._boost: Optional[float] = None
        self._query_name: Optional[str] = None

    def boost(self, boost: Optional[float]) -> "MatchAllQuery":
        self._boost = boost
        return self

    def query_name(self, query_name: str) -> "MatchAllQuery":
        self._query_name = query_name
        return self

    def source(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {}
        if self._boost is not None:
            params["boost"] = self._boost
        if self._query_name is not None:
            params["_name"] = self._query_name
        return {"match_all": params}
