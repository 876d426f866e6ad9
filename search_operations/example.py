"""
Example usage of search operations module.

This module demonstrates how to build queries and run a search template
against a running engine (ELASTIC_URL, default http://localhost:9200).
"""

import asyncio
import json
import logging

from connection_management import ElasticClient, ElasticHTTPError
from config import load_settings
from search_operations import (
    KnnQuery,
    TermQuery,
    MatchAllQuery,
    SearchResultDecodeError,
)
from elastic_ops_exceptions import TransportError

logger = logging.getLogger(__name__)


def show_queries():
    """Print the wire documents of a few queries."""
    # Example 1: KNN query with a single filter (inlined as an object)
    logger.info("Example 1: KNN query with one filter")
    knn = KnnQuery("embedding", 10, 100, [1.0, 2.0, 3.0]).filter(TermQuery("field", "value"))
    logger.info(json.dumps(knn.source()))

    # Example 2: KNN query with two filters and a boost (filters sent as a list)
    logger.info("\nExample 2: KNN query with two filters and a boost")
    knn = (
        KnnQuery("embedding", 5, 50, [0.1, 0.2, 0.3])
        .boost(0.5)
        .filter(TermQuery("category", "books"), MatchAllQuery())
    )
    logger.info(json.dumps(knn.source()))


async def run_example(settings):
    """Run a search template request."""
    async with ElasticClient(settings) as client:
        # Example 3: Stored search template with parameters
        logger.info("\nExample 3: Search template")
        service = (
            client.search_template()
            .index("example-index")
            .id("example-template")
            .params({"query_string": "vector search", "size": 3})
            .filter_path("hits.hits._id", "hits.hits._score", "hits.total")
            .pretty(False)
        )

        path, params = service.build_url()
        logger.info(f"POST {path} {params}")

        try:
            result = await service.do(timeout=10.0)
            logger.info(f"Found {result.total_hits()} results in {result.took}ms")
            for i, hit in enumerate(result.hits.hits[:3] if result.hits else []):
                logger.info(f"Result {i+1}: ID={hit.id}, Score={hit.score}")

        except SearchResultDecodeError as e:
            logger.error(f"Response could not be decoded: {e}")
            logger.info(f"Response headers: {dict(e.result.header or {})}")
        except ElasticHTTPError as e:
            logger.error(f"Engine returned {e.status_code}: {e.reason}")
        except TransportError as e:
            logger.error(f"Search template failed: {e}")


if __name__ == "__main__":
    settings = load_settings()
    logging.basicConfig(level=settings.monitoring.log_level)

    show_queries()
    asyncio.run(run_example(settings))
