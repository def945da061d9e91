"""
Application configuration using Pydantic Settings.
All config is loaded from environment variables / .env file.
"""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    # ── App ──────────────────────────────────────────────
    APP_NAME: str = "study-rag-api"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: str = "http://localhost:8081,http://localhost:19006"  # comma-separated

    # ── Supabase ─────────────────────────────────────────
    # Credentials default to "" so the app boots; checked at first use.
    SUPABASE_URL: str = ""
    SUPABASE_SERVICE_KEY: str = ""  # service_role key (admin ops, bypasses RLS)

    # ── Embedding ────────────────────────────────────────
    EMBEDDING_PROVIDER: str = "openai"  # openai | gemini
    EMBEDDING_MODEL: str = "text-embedding-3-large"
    EMBEDDING_DIMENSIONS: int = 0  # 0 = keep the model's native length
    EMBEDDING_API_KEY: str = ""

    # ── LLM (Provider-Agnostic) ──────────────────────────
    LLM_PROVIDER: str = "openrouter"  # openrouter | openai
    LLM_MODEL: str = "moonshotai/kimi-k2-0905"
    LLM_API_KEY: str = ""
    LLM_BASE_URL: str = "https://openrouter.ai/api/v1"

    # ── RAG ──────────────────────────────────────────────
    CHUNK_MAX_TOKENS: int = 500
    SEARCH_MATCH_THRESHOLD: float = 0.5
    SEARCH_MATCH_COUNT: int = 10
    ORCHESTRATOR_MATCH_THRESHOLD: float = 0.5
    ORCHESTRATOR_MATCH_COUNT: int = 5

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "extra": "ignore",
    }

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance (singleton)."""
    return Settings()
