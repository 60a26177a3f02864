"""Audit trail route (org admins only)."""

from fastapi import APIRouter

from orgboard.dependencies import AdminUser, DBSession
from orgboard.models.activity_log import ActivityLogEntry
from orgboard.services.activity_log_service import list_recent_activity

router = APIRouter(prefix="/activity-logs", tags=["Activity Logs"])


@router.get("", response_model=list[ActivityLogEntry])
async def list_activity_logs(user: AdminUser, db: DBSession):
    return await list_recent_activity(db, user)
