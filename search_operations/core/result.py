"""
Search Result Models

Pydantic models for the engine's search response. Unknown keys are kept
rather than rejected so that newer engine versions decode cleanly.
"""

from typing import Any, Dict, List, Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field, field_validator


class TotalHits(BaseModel):
    """Total number of matching documents and whether the count is exact"""
    value: int = 0
    relation: str = "eq"


class ShardsInfo(BaseModel):
    """Shard execution summary of a search"""
    model_config = ConfigDict(extra="allow")

    total: int = 0
    successful: int = 0
    skipped: int = 0
    failed: int = 0


class SearchHit(BaseModel):
    """A single matching document"""
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    index: Optional[str] = Field(None, alias="_index")
    id: Optional[str] = Field(None, alias="_id")
    score: Optional[float] = Field(None, alias="_score")
    source: Optional[Dict[str, Any]] = Field(None, alias="_source")
    fields: Optional[Dict[str, Any]] = None
    sort: Optional[List[Any]] = None


class SearchHits(BaseModel):
    """Hits section of a search response"""
    model_config = ConfigDict(extra="allow")

    total: Optional[TotalHits] = None
    max_score: Optional[float] = None
    hits: List[SearchHit] = Field(default_factory=list)

    @field_validator("total", mode="before")
    @classmethod
    def coerce_legacy_total(cls, v):
        """Older engines report the total as a bare integer"""
        if isinstance(v, int):
            return {"value": v, "relation": "eq"}
        return v


class SearchResult(BaseModel):
    """
    Result of a search operation.

    Mirrors the engine's search response. ``header`` holds the HTTP response
    headers and is never read from or written to the JSON body.
    """
    model_config = ConfigDict(extra="allow", populate_by_name=True, arbitrary_types_allowed=True)

    took: Optional[int] = None
    timed_out: bool = False
    terminated_early: Optional[bool] = None
    shards: Optional[ShardsInfo] = Field(None, alias="_shards")
    hits: Optional[SearchHits] = None
    aggregations: Optional[Dict[str, Any]] = None
    scroll_id: Optional[str] = Field(None, alias="_scroll_id")
    pit_id: Optional[str] = None
    header: Optional[httpx.Headers] = Field(None, exclude=True)

    def total_hits(self) -> int:
        """Total number of hits, or 0 if the response carried none"""
        if self.hits is not None and self.hits.total is not None:
            return self.hits.total.value
        return 0

    def sources(self) -> List[Dict[str, Any]]:
        """The _source document of every hit, in rank order"""
        if self.hits is None:
            return []
        return [hit.source for hit in self.hits.hits if hit.source is not None]
