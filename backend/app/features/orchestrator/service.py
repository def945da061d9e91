"""
Orchestrator feature: retrieve context, build the prompt, call the LLM.

Flow: validate → search (threshold 0.5, top 5) → join chunk texts →
template for the content type → one chat completion → result + usage.
"""

import logging
from typing import Any

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage

from app.core.exceptions import UpstreamError, ValidationError
from app.core.llm_provider import create_llm
from app.features.knowledge.service import RetrievalService
from app.features.orchestrator.prompts import build_system_prompt
from app.features.orchestrator.schemas import (
    GenerationParameters,
    OrchestrationRequest,
    OrchestrationResult,
)

logger = logging.getLogger(__name__)


class ChatCompletionClient:
    """One chat-completion call per `complete`; model handle built lazily."""

    def __init__(self, model: BaseChatModel | None = None):
        self._model = model

    @property
    def model(self) -> BaseChatModel:
        if self._model is None:
            self._model = create_llm()
        return self._model

    async def complete(
        self,
        system_prompt: str,
        user_message: str,
        parameters: GenerationParameters,
    ) -> tuple[str, dict[str, Any]]:
        """Returns (completion text, token usage)."""
        model = self.model
        try:
            response = await model.bind(**parameters.to_model_kwargs()).ainvoke(
                [SystemMessage(content=system_prompt), HumanMessage(content=user_message)]
            )
        except Exception as e:
            raise UpstreamError("llm", f"Error generating completion: {e}") from e

        usage = response.response_metadata.get("token_usage") or response.usage_metadata or {}
        return extract_text(response.content), dict(usage)


def extract_text(content) -> str:
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for item in content:
            if isinstance(item, dict) and "text" in item:
                parts.append(item["text"])
            elif isinstance(item, str):
                parts.append(item)
        return "\n".join(parts)
    return str(content)


class Orchestrator:
    """Composes retrieval output into a prompt and dispatches it to the LLM."""

    def __init__(
        self,
        retrieval: RetrievalService,
        llm: ChatCompletionClient,
        match_threshold: float = 0.5,
        match_count: int = 5,
    ):
        self.retrieval = retrieval
        self.llm = llm
        self.match_threshold = match_threshold
        self.match_count = match_count

    async def orchestrate(self, request: OrchestrationRequest) -> OrchestrationResult:
        """Generate study content of `request.type` for `request.query`.

        Raises:
            ValidationError: If type or query is missing.
            UpstreamError: If retrieval or generation fails.
        """
        if not request.type or not request.query:
            raise ValidationError("type and query are required")

        docs = await self.retrieval.search(request.query, self.match_threshold, self.match_count)
        context = "\n\n".join(doc.text for doc in docs)

        system_prompt = build_system_prompt(request.type, context, request.systemPrompt)

        text, usage = await self.llm.complete(system_prompt, request.query, request.parameters)
        logger.info(f"🧠 Generated {request.type.value} from {len(docs)} docs (usage={usage})")

        return OrchestrationResult(result=text, usage=usage, docsCount=len(docs))
