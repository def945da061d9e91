"""
Syllabus feature: Service layer for hierarchy lookups over `syllabus_nodes`.
"""

from supabase import Client

from app.core.database import get_supabase_admin_client, parse_rows, run_query
from app.core.exceptions import NotFoundError
from app.features.syllabus.schemas import SyllabusLevel, SyllabusNode

SYLLABUS_TABLE = "syllabus_nodes"


class SyllabusService:
    """Read-only access to the syllabus forest."""

    def __init__(self, db: Client | None = None):
        self._db = db

    @property
    def db(self) -> Client:
        if self._db is None:
            self._db = get_supabase_admin_client()
        return self._db

    # ── Single node / path ───────────────────────────────

    async def get_node(self, node_id: str) -> SyllabusNode:
        """Fetch one node.

        Raises:
            NotFoundError: If no node has this id.
        """
        result = await run_query(
            self.db.table(SYLLABUS_TABLE).select("*").eq("id", node_id).limit(1).execute,
            description="fetching syllabus node",
        )
        if not result.data:
            raise NotFoundError(f"Syllabus node not found: {node_id}")
        return parse_rows(SyllabusNode, result.data[:1], description="syllabus node")[0]

    async def get_path(self, node_id: str) -> list[SyllabusNode]:
        """Return the chain of nodes from the root down to `node_id`.

        Follows parent_id until it is null. There is no cycle guard: a
        cyclic parent chain never terminates.

        Raises:
            NotFoundError: If any node in the chain is missing.
        """
        path: list[SyllabusNode] = []
        current_id: str | None = node_id

        while current_id:
            node = await self.get_node(current_id)
            path.insert(0, node)
            current_id = node.parent_id

        return path

    # ── Listings ─────────────────────────────────────────

    async def list_subjects(self) -> list[SyllabusNode]:
        return await self._list(SyllabusLevel.SUBJECT)

    async def list_papers(self, subject_id: str) -> list[SyllabusNode]:
        return await self._list(SyllabusLevel.PAPER, subject_id)

    async def list_topics(self, paper_id: str) -> list[SyllabusNode]:
        return await self._list(SyllabusLevel.TOPIC, paper_id)

    async def list_subtopics(self, topic_id: str) -> list[SyllabusNode]:
        return await self._list(SyllabusLevel.SUBTOPIC, topic_id)

    async def _list(self, level: SyllabusLevel, parent_id: str | None = None) -> list[SyllabusNode]:
        """Nodes at `level` (optionally under `parent_id`), ordered by `order`."""
        query = self.db.table(SYLLABUS_TABLE).select("*").eq("level", level.value)
        if parent_id is not None:
            query = query.eq("parent_id", parent_id)

        result = await run_query(
            query.order("order").execute,
            description=f"fetching syllabus {level.value}s",
        )
        return parse_rows(SyllabusNode, result.data, description="syllabus nodes")
