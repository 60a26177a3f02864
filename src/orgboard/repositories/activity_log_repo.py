"""Activity log repository (append and read only)."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from orgboard.db.models.activity_log import ActivityLogRow
from orgboard.db.models.user import UserRow
from orgboard.repositories.base import BaseRepository


class ActivityLogRepository(BaseRepository[ActivityLogRow]):
    def __init__(self, session: AsyncSession):
        super().__init__(session, ActivityLogRow)

    async def append(self, **kwargs) -> ActivityLogRow:
        return await self.create(**kwargs)

    async def list_recent(self, org_id: str, limit: int) -> list[tuple[ActivityLogRow, str | None]]:
        stmt = (
            select(ActivityLogRow, UserRow.name)
            .outerjoin(UserRow, ActivityLogRow.user_id == UserRow.id)
            .where(ActivityLogRow.org_id == org_id)
            .order_by(ActivityLogRow.created_at.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [(entry, name) for entry, name in result.all()]
