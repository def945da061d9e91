"""
Knowledge feature: API routes for content ingestion and semantic search.
"""

import json
import logging

import pydantic
from fastapi import APIRouter, Depends, Request

from app.config import get_settings
from app.core.dependencies import get_retrieval_service, get_syllabus_service
from app.core.exceptions import (
    NotFoundError,
    NotImplementedFeatureError,
    UnsupportedMediaTypeError,
    ValidationError,
)
from app.features.knowledge.schemas import IngestRequest, IngestResponse, SearchRequest
from app.features.knowledge.service import RetrievalService
from app.features.syllabus.service import SyllabusService

logger = logging.getLogger(__name__)

router = APIRouter()


async def _parse_ingest_body(request: Request) -> IngestRequest:
    content_type = request.headers.get("content-type", "")

    if "multipart/form-data" in content_type:
        # TODO: extract text from uploaded PDF/DOCX files before chunking
        raise NotImplementedFeatureError("File upload not implemented yet")
    if "application/json" not in content_type:
        raise UnsupportedMediaTypeError("Unsupported content type")

    try:
        return IngestRequest.model_validate(await request.json())
    except (json.JSONDecodeError, pydantic.ValidationError) as e:
        raise ValidationError("Request body must be a JSON object", detail=str(e)) from e


@router.post("/ingest", response_model=IngestResponse)
async def ingest_content(
    request: Request,
    service: RetrievalService = Depends(get_retrieval_service),
):
    """Chunk a document, embed every chunk and store the embeddings."""
    data = await _parse_ingest_body(request)
    if not data.contentId or not data.text:
        raise ValidationError("contentId and text are required")

    chunks_count = await service.ingest(data.contentId, data.text, data.metadata)
    logger.info(f"📥 Ingested content {data.contentId}: {chunks_count} chunks")
    return IngestResponse(success=True, chunksCount=chunks_count)


@router.post("/search")
async def search_documents(
    data: SearchRequest,
    service: RetrievalService = Depends(get_retrieval_service),
    syllabus: SyllabusService = Depends(get_syllabus_service),
):
    """Semantic search across ingested chunks, with optional syllabus context."""
    if not data.query:
        raise ValidationError("query is required")

    settings = get_settings()
    threshold = data.matchThreshold if data.matchThreshold is not None else settings.SEARCH_MATCH_THRESHOLD
    limit = data.matchCount or settings.SEARCH_MATCH_COUNT

    results = await service.search(data.query, threshold, limit)

    syllabus_context = None
    if data.syllabusNodeId:
        try:
            node = await syllabus.get_node(data.syllabusNodeId)
            path = await syllabus.get_path(data.syllabusNodeId)
            syllabus_context = {
                "node": node.model_dump(mode="json"),
                "path": [n.model_dump(mode="json") for n in path],
            }
        except NotFoundError as e:
            # Syllabus info is optional context: report it in-field, keep the results
            logger.warning(f"⚠️ Search syllabus context unavailable: {e.message}")
            syllabus_context = {"node": None, "path": [], "error": e.message}

    return {
        "results": [r.model_dump(mode="json") for r in results],
        "syllabusContext": syllabus_context,
    }
