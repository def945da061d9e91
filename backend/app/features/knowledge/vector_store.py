"""
Knowledge feature: pgvector-backed store for chunk embeddings.

Records live in the `embeddings` table; similarity search is the
`match_documents` SQL function (cosine similarity, pgvector).
"""

import asyncio
import logging
from typing import Any

from supabase import Client

from app.core.database import get_supabase_admin_client, parse_rows, run_query
from app.features.knowledge.embedding import EmbeddingClient
from app.features.knowledge.schemas import RetrievalResult

logger = logging.getLogger(__name__)

EMBEDDINGS_TABLE = "embeddings"
MATCH_FUNCTION = "match_documents"


class VectorStoreAdapter:
    """Persists chunk embeddings and runs nearest-neighbour queries."""

    def __init__(self, db: Client | None, embedder: EmbeddingClient):
        self._db = db
        self.embedder = embedder

    @property
    def db(self) -> Client:
        if self._db is None:
            self._db = get_supabase_admin_client()
        return self._db

    async def _build_record(self, content_id: str, chunk: str, metadata: dict) -> dict:
        embedding = await self.embedder.embed(chunk)
        return {
            "content_id": content_id,
            "text": chunk,
            "embedding": embedding,
            "metadata": metadata,
        }

    async def store(
        self,
        content_id: str,
        chunks: list[str],
        metadata: dict[str, Any] | None = None,
    ) -> list[dict]:
        """Embed every chunk concurrently, then insert all records at once.

        The insert runs only after every embedding succeeded; the first
        embedding failure propagates and nothing is written.

        Returns:
            The rows reported back by the insert.
        """
        metadata = metadata or {}
        if not chunks:
            logger.info(f"⏭️ No chunks to store for content {content_id}")
            return []

        records = await asyncio.gather(
            *(self._build_record(content_id, chunk, metadata) for chunk in chunks)
        )

        result = await run_query(
            self.db.table(EMBEDDINGS_TABLE).insert(list(records)).execute,
            description="storing embeddings",
        )
        logger.info(f"✅ Stored {len(records)} embeddings for content {content_id}")
        return result.data or []

    async def query(
        self,
        vector: list[float],
        threshold: float,
        limit: int,
    ) -> list[RetrievalResult]:
        """Return stored chunks with similarity >= threshold, best first.

        Ordering among equal similarities is whatever the database returns.
        """
        result = await run_query(
            self.db.rpc(
                MATCH_FUNCTION,
                {
                    "query_embedding": vector,
                    "match_threshold": threshold,
                    "match_count": limit,
                },
            ).execute,
            description="searching documents",
        )

        rows = parse_rows(RetrievalResult, result.data, description="match rows")
        rows = [r for r in rows if r.similarity >= threshold]
        # sorted() is stable, so ties keep the store's order
        rows = sorted(rows, key=lambda r: r.similarity, reverse=True)
        return rows[:limit]
