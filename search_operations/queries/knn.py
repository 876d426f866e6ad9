"""
KNN Query

Approximate k-nearest-neighbour search over a dense vector field.

Wire format:

    {
      "knn": {
        "field": "embedding",
        "k": 10,
        "num_candidates": 100,
        "query_vector": [1.0, 2.0, 3.0],
        "boost": 1.0,
        "filter": {"term": {"field": "value"}}
      }
    }

A single filter is inlined as an object; two or more are sent as a list.
The engine treats a one-element list differently from a bare object, so
this shape must not be normalized.
"""

from typing import Any, Dict, List, Optional, Sequence

from ..core.base import Query, source_of


class KnnQuery(Query):
    """
    Vector similarity query.

    ``field``, ``k``, ``num_candidates`` and ``query_vector`` are expected to
    be set before source() is called; nothing is enforced earlier so callers
    may keep adjusting the query.
    """

    def __init__(self, field: str, k: int, num_candidates: int, query_vector: Sequence[float]):
        self._field = field
        self._k = k
        self._num_candidates = num_candidates
        self._query_vector = query_vector
        self._boost: Optional[float] = None
        self._filter: List[Query] = []

    def field(self, field: str) -> "KnnQuery":
        self._field = field
        return self

    def k(self, k: int) -> "KnnQuery":
        self._k = k
        return self

    def num_candidates(self, num_candidates: int) -> "KnnQuery":
        self._num_candidates = num_candidates
        return self

    def query_vector(self, query_vector: Sequence[float]) -> "KnnQuery":
        self._query_vector = query_vector
        return self

    def boost(self, boost: Optional[float]) -> "KnnQuery":
        """Set the relevance boost; None removes it from the document."""
        self._boost = boost
        return self

    def filter(self, *filters: Query) -> "KnnQuery":
        """
        Replace the post-filters. Order is kept on the wire.

        Filters may be passed positionally or as a single list or tuple:
        ``filter(a, b)`` and ``filter([a, b])`` are the same.
        """
        if len(filters) == 1 and isinstance(filters[0], (list, tuple)):
            filters = tuple(filters[0])
        self._filter = list(filters)
        return self

    def source(self) -> Dict[str, Any]:
        knn: Dict[str, Any] = {
            "field": self._field,
            "k": self._k,
            "num_candidates": self._num_candidates,
            "query_vector": list(self._query_vector) if self._query_vector is not None else None,
        }

        if self._boost is not None:
            knn["boost"] = self._boost

        if len(self._filter) == 1:
            knn["filter"] = source_of(self._filter[0])
        elif len(self._filter) > 1:
            knn["filter"] = [source_of(f) for f in self._filter]

        return {"knn": knn}
