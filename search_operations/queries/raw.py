"""
Raw Query

Passes a caller-supplied document through unchanged, for query types this
package has no builder for.
"""

import json
from typing import Any, Mapping, Union

from ..core.base import Query
from ..core.search_ops_exceptions import QueryEncodingError


class RawQuery(Query):
    """
    Query built from a ready-made document or its JSON text.

    JSON text is parsed on every call to source(), so invalid text surfaces
    as a QueryEncodingError from the query that embeds it.
    """

    def __init__(self, query: Union[str, bytes, Mapping[str, Any]]):
        self._query = query

    def source(self) -> Any:
        if isinstance(self._query, (str, bytes)):
            try:
                return json.loads(self._query)
            except ValueError as e:
                raise QueryEncodingError(f"Raw query is not valid JSON: {e}") from e
        return dict(self._query)
