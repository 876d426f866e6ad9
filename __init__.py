"""
Elastic_Ops - Query Construction and Request Execution for Elasticsearch

A toolkit for building structured search requests against an
Elasticsearch-style HTTP API. This package provides typed query builders
that render the engine's JSON wire format, request services that encode
paths and query-string parameters, a shared async HTTP client, and typed
search results.
"""

__version__ = "0.1.0"
__author__ = "RhythmX"
