"""
Syllabus feature: Schemas for the curriculum outline.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel


class SyllabusLevel(str, Enum):
    SUBJECT = "subject"
    PAPER = "paper"
    TOPIC = "topic"
    SUBTOPIC = "subtopic"


class SyllabusNode(BaseModel):
    """One row of `syllabus_nodes` (subject → paper → topic → subtopic)."""
    id: str
    parent_id: str | None = None
    title: str
    description: str | None = None
    level: SyllabusLevel
    order: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None
