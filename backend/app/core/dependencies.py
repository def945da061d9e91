"""
FastAPI dependency injection functions.

Each service is built once per process and shared by every request.
Vendor handles inside them (Supabase client, embedding model, chat model)
are created on first use, so a missing credential surfaces as a
ConfigurationError on the first request that needs it.
"""

from functools import lru_cache

from app.config import get_settings
from app.features.knowledge.embedding import EmbeddingClient
from app.features.knowledge.service import RetrievalService
from app.features.knowledge.vector_store import VectorStoreAdapter
from app.features.orchestrator.service import ChatCompletionClient, Orchestrator
from app.features.syllabus.service import SyllabusService


@lru_cache
def get_embedding_client() -> EmbeddingClient:
    return EmbeddingClient(dimensions=get_settings().EMBEDDING_DIMENSIONS)


@lru_cache
def get_chat_client() -> ChatCompletionClient:
    return ChatCompletionClient()


@lru_cache
def get_retrieval_service() -> RetrievalService:
    """Dependency: retrieval service bound to the shared clients."""
    embedder = get_embedding_client()
    return RetrievalService(
        embedder=embedder,
        store=VectorStoreAdapter(None, embedder),
        chunk_max_tokens=get_settings().CHUNK_MAX_TOKENS,
    )


@lru_cache
def get_syllabus_service() -> SyllabusService:
    """Dependency: syllabus hierarchy service."""
    return SyllabusService()


@lru_cache
def get_orchestrator() -> Orchestrator:
    """Dependency: RAG orchestrator."""
    settings = get_settings()
    return Orchestrator(
        retrieval=get_retrieval_service(),
        llm=get_chat_client(),
        match_threshold=settings.ORCHESTRATOR_MATCH_THRESHOLD,
        match_count=settings.ORCHESTRATOR_MATCH_COUNT,
    )
