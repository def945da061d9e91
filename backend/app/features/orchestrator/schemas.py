"""
Orchestrator feature: Schemas for generation requests and results.
"""

from typing import Any

from pydantic import BaseModel, Field

from app.features.orchestrator.prompts import ContentType


class GenerationParameters(BaseModel):
    """Sampling parameters forwarded to the chat-completion API."""
    temperature: float = 0.7
    maxTokens: int = Field(default=2048, ge=1)
    topP: float = 1
    frequencyPenalty: float = 0
    presencePenalty: float = 0

    def to_model_kwargs(self) -> dict[str, Any]:
        return {
            "temperature": self.temperature,
            "max_tokens": self.maxTokens,
            "top_p": self.topP,
            "frequency_penalty": self.frequencyPenalty,
            "presence_penalty": self.presencePenalty,
        }


class OrchestrationRequest(BaseModel):
    """JSON body for POST /orchestrate."""
    type: ContentType | None = None
    query: str | None = None
    syllabusNodeId: str | None = None
    systemPrompt: str | None = None  # appended after the type's template
    parameters: GenerationParameters = Field(default_factory=GenerationParameters)


class OrchestrationResult(BaseModel):
    result: str
    usage: dict[str, Any] = {}
    docsCount: int
