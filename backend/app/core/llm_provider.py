"""
Provider-agnostic LLM and embedding factories.

Switch provider by changing env vars, no code changes needed:
  LLM_PROVIDER=openrouter | openai
  LLM_MODEL=moonshotai/kimi-k2-0905 | gpt-4o-mini
  EMBEDDING_PROVIDER=openai | gemini
"""

from langchain_core.embeddings import Embeddings
from langchain_core.language_models import BaseChatModel

from app.config import get_settings
from app.core.exceptions import ConfigurationError


def create_llm() -> BaseChatModel:
    """Create a chat model based on env configuration.

    Sampling parameters are bound per request, not here.

    Raises:
        ConfigurationError: If the API key is missing or the provider is unknown.
    """
    settings = get_settings()
    if not settings.LLM_API_KEY:
        raise ConfigurationError("LLM_API_KEY must be configured")

    match settings.LLM_PROVIDER:
        case "openrouter":
            from langchain_openai import ChatOpenAI

            return ChatOpenAI(
                model=settings.LLM_MODEL,
                api_key=settings.LLM_API_KEY,
                base_url=settings.LLM_BASE_URL,
            )

        case "openai":
            from langchain_openai import ChatOpenAI

            return ChatOpenAI(
                model=settings.LLM_MODEL,
                api_key=settings.LLM_API_KEY,
            )

        case _:
            raise ConfigurationError(
                f"Unknown LLM provider: '{settings.LLM_PROVIDER}'. "
                f"Supported: openrouter, openai"
            )


def create_embeddings() -> Embeddings:
    """Create an embedding model based on env configuration.

    Raises:
        ConfigurationError: If the API key is missing or the provider is unknown.
    """
    settings = get_settings()
    if not settings.EMBEDDING_API_KEY:
        raise ConfigurationError("EMBEDDING_API_KEY must be configured")

    match settings.EMBEDDING_PROVIDER:
        case "openai":
            from langchain_openai import OpenAIEmbeddings

            return OpenAIEmbeddings(
                model=settings.EMBEDDING_MODEL,
                api_key=settings.EMBEDDING_API_KEY,
            )

        case "gemini":
            from langchain_google_genai import GoogleGenerativeAIEmbeddings

            return GoogleGenerativeAIEmbeddings(
                model=f"models/{settings.EMBEDDING_MODEL}",
                google_api_key=settings.EMBEDDING_API_KEY,
            )

        case _:
            raise ConfigurationError(
                f"Unknown embedding provider: '{settings.EMBEDDING_PROVIDER}'. "
                f"Supported: openai, gemini"
            )
