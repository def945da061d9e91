"""
Shared fixtures: services wired to in-memory fakes.
"""

import pytest
from fastapi.testclient import TestClient

from app.config import get_settings
from app.core import dependencies
from app.features.knowledge.embedding import EmbeddingClient
from app.features.knowledge.service import RetrievalService
from app.features.knowledge.vector_store import VectorStoreAdapter
from app.features.orchestrator.service import ChatCompletionClient, Orchestrator
from app.features.syllabus.service import SyllabusService
from app.main import app
from fakes import FakeSupabase, KeywordEmbeddings, RecordingChatModel, make_node


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    for key in ("SUPABASE_URL", "SUPABASE_SERVICE_KEY", "EMBEDDING_API_KEY", "LLM_API_KEY"):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fake_db():
    return FakeSupabase()


@pytest.fixture
def embeddings_model():
    return KeywordEmbeddings()


@pytest.fixture
def chat_model():
    return RecordingChatModel()


@pytest.fixture
def retrieval_service(fake_db, embeddings_model):
    embedder = EmbeddingClient(model=embeddings_model)
    return RetrievalService(embedder, VectorStoreAdapter(fake_db, embedder))


@pytest.fixture
def syllabus_service(fake_db):
    return SyllabusService(fake_db)


@pytest.fixture
def orchestrator(retrieval_service, chat_model):
    return Orchestrator(retrieval_service, ChatCompletionClient(model=chat_model))


@pytest.fixture
def client(retrieval_service, syllabus_service, orchestrator):
    app.dependency_overrides[dependencies.get_retrieval_service] = lambda: retrieval_service
    app.dependency_overrides[dependencies.get_syllabus_service] = lambda: syllabus_service
    app.dependency_overrides[dependencies.get_orchestrator] = lambda: orchestrator
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def syllabus_tree(fake_db):
    fake_db.tables["syllabus_nodes"] = [
        make_node("gs", "subject", order=1, title="General Studies"),
        make_node("csat", "subject", order=2, title="CSAT"),
        make_node("gs-2", "paper", parent_id="gs", order=2),
        make_node("gs-1", "paper", parent_id="gs", order=1),
        make_node("polity", "topic", parent_id="gs-2", order=1),
        make_node("fundamental-rights", "subtopic", parent_id="polity", order=1),
    ]
    return fake_db
