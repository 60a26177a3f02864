"""Read side of the activity log."""

from sqlalchemy.ext.asyncio import AsyncSession

from orgboard.config import settings
from orgboard.models.activity_log import ActivityLogEntry
from orgboard.repositories.activity_log_repo import ActivityLogRepository
from orgboard.security import AuthContext


async def list_recent_activity(session: AsyncSession, caller: AuthContext) -> list[ActivityLogEntry]:
    rows = await ActivityLogRepository(session).list_recent(
        caller.org_id, limit=settings.activity_log_limit
    )
    return [
        ActivityLogEntry(id=entry.id, action=entry.action, created_at=entry.created_at, user_name=name)
        for entry, name in rows
    ]
