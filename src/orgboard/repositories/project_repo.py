"""Project repository. Every lookup is scoped by org_id."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from orgboard.db.base import utcnow
from orgboard.db.models.project import ProjectRow
from orgboard.repositories.base import BaseRepository


class ProjectRepository(BaseRepository[ProjectRow]):
    def __init__(self, session: AsyncSession):
        super().__init__(session, ProjectRow)

    async def get_for_org(
        self, project_id: str, org_id: str, include_deleted: bool = False
    ) -> ProjectRow | None:
        stmt = select(ProjectRow).where(ProjectRow.id == project_id, ProjectRow.org_id == org_id)
        if not include_deleted:
            stmt = stmt.where(ProjectRow.is_deleted.is_(False))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_page(self, org_id: str, limit: int, offset: int) -> list[ProjectRow]:
        stmt = (
            select(ProjectRow)
            .where(ProjectRow.org_id == org_id, ProjectRow.is_deleted.is_(False))
            .order_by(ProjectRow.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_active(self, org_id: str) -> int:
        stmt = select(func.count()).select_from(ProjectRow).where(
            ProjectRow.org_id == org_id,
            ProjectRow.is_deleted.is_(False),
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def touch(self, row: ProjectRow, **kwargs) -> ProjectRow:
        """Coalesce update that always moves ``updated_at``."""
        return await self.update(row, updated_at=utcnow(), **kwargs)

    async def soft_delete(self, row: ProjectRow) -> ProjectRow:
        return await self.touch(row, is_deleted=True)
