"""
Knowledge feature: Embedding client.
Wraps the provider's embedding model for use across the app.
"""

import logging

from langchain_core.embeddings import Embeddings

from app.core.exceptions import UpstreamError
from app.core.llm_provider import create_embeddings

logger = logging.getLogger(__name__)


class EmbeddingClient:
    """Maps text to a fixed-length vector via the remote embeddings API.

    The model handle is created on first use and reused afterwards.
    No caching, retry or batching: one network call per `embed`.
    """

    def __init__(self, model: Embeddings | None = None, dimensions: int = 0):
        self._model = model
        self.dimensions = dimensions

    @property
    def model(self) -> Embeddings:
        if self._model is None:
            self._model = create_embeddings()
        return self._model

    async def embed(self, text: str) -> list[float]:
        """Generate the embedding vector for a single text.

        Raises:
            ConfigurationError: If the embeddings API is not configured.
            UpstreamError: If the remote call fails.
        """
        model = self.model
        try:
            vector = await model.aembed_query(text)
        except Exception as e:
            raise UpstreamError("embeddings", f"Error generating embeddings: {e}") from e

        if self.dimensions:
            # Truncate to the desired dimensionality
            return vector[: self.dimensions]
        return vector
