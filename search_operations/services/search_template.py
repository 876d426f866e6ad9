"""
Search Template Service

Runs a stored or inline search template against one index or all indices.

See https://www.elastic.co/guide/en/elasticsearch/reference/current/search-template-api.html
for details.
"""

import logging
from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, ValidationError

from connection_management import ElasticClient, expand
from elastic_ops_exceptions import DecodeError
from ..core.base import BaseService, encode_json
from ..core.result import SearchResult
from ..core.search_ops_exceptions import QueryEncodingError, SearchResultDecodeError

logger = logging.getLogger(__name__)


class SearchTemplateBody(BaseModel):
    """
    Request body of a search template call.

    Kept separate from the service so that adding configuration to the
    service (headers, flags) never changes what goes on the wire.
    Unset fields are omitted.
    """
    model_config = ConfigDict(extra="forbid")

    index: Optional[str] = None
    id: Optional[str] = None
    params: Optional[Dict[str, Any]] = None


class SearchTemplateService(BaseService[SearchResult]):
    """
    Builder for the search template endpoint.

    Usage:
        result = await (
            SearchTemplateService(client)
            .index("products")
            .id("by-category")
            .params({"category": "books", "size": 10})
            .do()
        )
    """

    PATH_TEMPLATE = "{index}/_search/template"
    PATH_ALL_INDICES = "_search/template"

    def __init__(self, client: ElasticClient):
        super().__init__(client)
        self._index: Optional[str] = None
        self._id: Optional[str] = None
        self._params: Optional[Dict[str, Any]] = None

    def index(self, index: str) -> "SearchTemplateService":
        """Index to search. When unset the template runs against all indices."""
        self._index = index
        return self

    def id(self, template_id: str) -> "SearchTemplateService":
        """Id of the stored search template."""
        self._id = template_id
        return self

    def params(self, params: Optional[Mapping[str, Any]]) -> "SearchTemplateService":
        """Values substituted into the template."""
        self._params = dict(params) if params is not None else None
        return self

    def build_url(self) -> Tuple[str, Dict[str, str]]:
        """
        Build the path and query-string parameters.

        Returns:
            Tuple of (path, parameters)

        Raises:
            PathResolutionError: If the index cannot be placed in the path
            QueryEncodingError: If the template params cannot be JSON-encoded
        """
        if self._index:
            path = expand(self.PATH_TEMPLATE, {"index": self._index})
        else:
            path = self.PATH_ALL_INDICES

        params = self._common_params()
        if self._id:
            params["id"] = self._id
        if self._params is not None:
            params["params"] = encode_json(self._params)

        logger.debug(f"Search template request: path={path} params={params}")
        return path, params

    def body(self) -> SearchTemplateBody:
        """
        The request body for the current configuration.

        Raises:
            QueryEncodingError: If the params do not fit the body, e.g. non-string keys
        """
        try:
            return SearchTemplateBody(
                index=self._index or None,
                id=self._id or None,
                params=self._params,
            )
        except ValidationError as e:
            raise QueryEncodingError(f"Failed to encode search template body: {e}") from e

    async def do(self, timeout: Optional[float] = None) -> SearchResult:
        """
        Execute the search template and return the decoded result.

        Args:
            timeout: Seconds to wait for the response; None waits for the
                transport's own timeout

        Returns:
            SearchResult with the response headers attached

        Raises:
            InvalidSearchParametersError: If validation fails
            PathResolutionError: If the path cannot be resolved
            QueryEncodingError: If parameters or body cannot be encoded
            SearchTimeoutError: If ``timeout`` expires
            TransportError: If the request fails
            SearchResultDecodeError: If the response does not decode; its
                ``result`` still carries the response headers
        """
        # Check pre-conditions
        self.validate()

        # Get URL for request
        path, params = self.build_url()

        body = self.body().model_dump_json(exclude_none=True).encode("utf-8")

        response = await self._perform("POST", path, params, body, timeout)

        ret = SearchResult()
        try:
            ret = self._client.decoder.decode(response.body, SearchResult)
        except DecodeError as e:
            ret.header = response.header
            logger.error(f"Search template response from {path} could not be decoded: {e}")
            raise SearchResultDecodeError(str(e), result=ret, header=response.header) from e

        ret.header = response.header
        return ret
