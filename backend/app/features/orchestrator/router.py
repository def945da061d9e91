"""
Orchestrator feature: API route for RAG-backed content generation.
"""

from fastapi import APIRouter, Depends

from app.core.dependencies import get_orchestrator
from app.features.orchestrator.schemas import OrchestrationRequest
from app.features.orchestrator.service import Orchestrator

router = APIRouter()


@router.post("/orchestrate")
async def orchestrate(
    data: OrchestrationRequest,
    orchestrator: Orchestrator = Depends(get_orchestrator),
):
    """Generate a lesson, test, script or notes grounded in retrieved chunks."""
    outcome = await orchestrator.orchestrate(data)
    return {
        "result": outcome.result,
        "usage": outcome.usage,
        "context": {"docsCount": outcome.docsCount},
    }
