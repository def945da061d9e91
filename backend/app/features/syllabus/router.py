"""
Syllabus feature: API routes for browsing the curriculum outline.
"""

from fastapi import APIRouter, Depends

from app.core.dependencies import get_syllabus_service
from app.features.syllabus.service import SyllabusService

router = APIRouter()


def _dump(nodes) -> list[dict]:
    return [n.model_dump(mode="json") for n in nodes]


@router.get("/subjects")
async def list_subjects(service: SyllabusService = Depends(get_syllabus_service)):
    """All top-level subjects, in syllabus order."""
    return {"data": _dump(await service.list_subjects())}


@router.get("/subjects/{subject_id}/papers")
async def list_papers(subject_id: str, service: SyllabusService = Depends(get_syllabus_service)):
    return {"data": _dump(await service.list_papers(subject_id))}


@router.get("/papers/{paper_id}/topics")
async def list_topics(paper_id: str, service: SyllabusService = Depends(get_syllabus_service)):
    return {"data": _dump(await service.list_topics(paper_id))}


@router.get("/topics/{topic_id}/subtopics")
async def list_subtopics(topic_id: str, service: SyllabusService = Depends(get_syllabus_service)):
    return {"data": _dump(await service.list_subtopics(topic_id))}


@router.get("/nodes/{node_id}")
async def get_node(node_id: str, service: SyllabusService = Depends(get_syllabus_service)):
    node = await service.get_node(node_id)
    return {"data": node.model_dump(mode="json")}


@router.get("/nodes/{node_id}/path")
async def get_path(node_id: str, service: SyllabusService = Depends(get_syllabus_service)):
    """Root-first chain of nodes leading to `node_id`."""
    return {"data": _dump(await service.get_path(node_id))}
