"""
Knowledge feature: Service layer for vector-based knowledge retrieval.
Handles ingestion (chunk → embed → store) and semantic search.
"""

import logging
from typing import Any

from app.features.knowledge.chunker import split_text_into_chunks
from app.features.knowledge.embedding import EmbeddingClient
from app.features.knowledge.schemas import RetrievalResult
from app.features.knowledge.vector_store import VectorStoreAdapter

logger = logging.getLogger(__name__)


class RetrievalService:
    """Semantic search and ingestion over the `embeddings` table."""

    def __init__(
        self,
        embedder: EmbeddingClient,
        store: VectorStoreAdapter,
        chunk_max_tokens: int = 500,
    ):
        self.embedder = embedder
        self.store = store
        self.chunk_max_tokens = chunk_max_tokens

    async def search(
        self,
        query_text: str,
        threshold: float = 0.5,
        limit: int = 10,
    ) -> list[RetrievalResult]:
        """Embed the query and return the top matching chunks.

        Args:
            query_text: Natural language search query.
            threshold: Minimum similarity (0-1) for a chunk to be returned.
            limit: Maximum number of results.

        Returns:
            Results sorted by similarity, best first.
        """
        vector = await self.embedder.embed(query_text)
        results = await self.store.query(vector, threshold, limit)
        logger.info(f"🔍 Search returned {len(results)} chunks (threshold={threshold}, limit={limit})")
        return results

    async def ingest(
        self,
        content_id: str,
        text: str,
        metadata: dict[str, Any] | None = None,
    ) -> int:
        """Chunk a document and store an embedding per chunk.

        Returns:
            Number of chunks stored.
        """
        chunks = split_text_into_chunks(text, self.chunk_max_tokens)
        logger.info(f"✂️ Content {content_id}: {len(text)} chars → {len(chunks)} chunks")
        await self.store.store(content_id, chunks, metadata)
        return len(chunks)
