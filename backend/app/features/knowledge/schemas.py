"""
Knowledge feature: Schemas for ingestion and semantic search.
"""

from typing import Any

from pydantic import BaseModel, Field


class IngestRequest(BaseModel):
    """JSON body for POST /ingest."""
    contentId: str | None = None
    text: str | None = None
    metadata: dict[str, Any] | None = None


class IngestResponse(BaseModel):
    success: bool = True
    chunksCount: int


class SearchRequest(BaseModel):
    """JSON body for POST /search."""
    query: str | None = None
    matchThreshold: float | None = None
    matchCount: int | None = Field(default=None, ge=0)  # 0 or absent -> SEARCH_MATCH_COUNT
    syllabusNodeId: str | None = None


class RetrievalResult(BaseModel):
    """One ranked chunk returned by `match_documents`."""
    id: int | str
    content_id: str
    text: str
    metadata: dict[str, Any] | None = None
    similarity: float
