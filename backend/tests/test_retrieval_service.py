"""Tests for ingestion and semantic search through RetrievalService."""

import asyncio

import pytest

from app.core.exceptions import UpstreamError
from app.features.knowledge.embedding import EmbeddingClient
from app.features.knowledge.service import RetrievalService
from app.features.knowledge.vector_store import VectorStoreAdapter
from fakes import KeywordEmbeddings

DOCUMENT = (
    "The Constitution of India establishes a parliamentary system. "
    "The President is the constitutional head and Parliament makes laws. "
    "The monsoon brings most of the rainfall that feeds every river basin. "
    "Inflation and the union budget shape the economy."
)


def _ingest(service, content_id="ncert-polity", text=DOCUMENT, max_tokens=20):
    service.chunk_max_tokens = max_tokens
    return asyncio.run(service.ingest(content_id, text, {"source": "ncert"}))


def test_ingest_returns_chunk_count(retrieval_service, fake_db):
    count = _ingest(retrieval_service)

    assert count == len(fake_db.tables["embeddings"])
    assert count > 1


def test_search_is_sorted_and_above_threshold(retrieval_service):
    _ingest(retrieval_service)

    results = asyncio.run(retrieval_service.search("parliament constitution president", 0.1, 10))

    assert results
    similarities = [r.similarity for r in results]
    assert similarities == sorted(similarities, reverse=True)
    assert all(s >= 0.1 for s in similarities)
    assert "Parliament" in results[0].text or "Constitution" in results[0].text


def test_search_respects_limit(retrieval_service):
    _ingest(retrieval_service)
    results = asyncio.run(retrieval_service.search("constitution monsoon economy", 0.0, 2))
    assert len(results) == 2


def test_threshold_above_one_returns_nothing(retrieval_service):
    _ingest(retrieval_service)
    assert asyncio.run(retrieval_service.search("parliament", 1.1, 10)) == []


def test_query_embedding_error_passes_through(fake_db):
    embedder = EmbeddingClient(model=KeywordEmbeddings(fail_on="boom"))
    service = RetrievalService(embedder, VectorStoreAdapter(fake_db, embedder))

    with pytest.raises(UpstreamError):
        asyncio.run(service.search("boom", 0.5, 10))
    assert fake_db.rpc_calls == []


def test_ingest_failure_stores_nothing(fake_db):
    embedder = EmbeddingClient(model=KeywordEmbeddings(fail_on="monsoon"))
    service = RetrievalService(embedder, VectorStoreAdapter(fake_db, embedder), chunk_max_tokens=20)

    with pytest.raises(UpstreamError):
        asyncio.run(service.ingest("geo", DOCUMENT))
    assert "embeddings" not in fake_db.tables
