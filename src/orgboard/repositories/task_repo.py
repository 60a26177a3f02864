"""Task repository. Tenancy is checked through the owning project."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from orgboard.db.models.project import ProjectRow
from orgboard.db.models.task import TaskRow
from orgboard.db.models.user import UserRow
from orgboard.repositories.base import BaseRepository


class TaskRepository(BaseRepository[TaskRow]):
    def __init__(self, session: AsyncSession):
        super().__init__(session, TaskRow)

    async def get_for_org(self, task_id: str, org_id: str) -> TaskRow | None:
        """Return a live task whose live project belongs to ``org_id``."""
        stmt = (
            select(TaskRow)
            .join(ProjectRow, TaskRow.project_id == ProjectRow.id)
            .where(
                TaskRow.id == task_id,
                TaskRow.is_deleted.is_(False),
                ProjectRow.org_id == org_id,
                ProjectRow.is_deleted.is_(False),
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_for_project(self, project_id: str) -> list[tuple[TaskRow, str | None]]:
        """Live tasks of a project, newest first, paired with the assignee's name."""
        stmt = (
            select(TaskRow, UserRow.name)
            .outerjoin(UserRow, TaskRow.assigned_to == UserRow.id)
            .where(TaskRow.project_id == project_id, TaskRow.is_deleted.is_(False))
            .order_by(TaskRow.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [(task, name) for task, name in result.all()]
