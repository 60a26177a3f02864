"""Pydantic model for activity log entries."""

from datetime import datetime

from pydantic import BaseModel


class ActivityLogEntry(BaseModel):
    id: str
    action: str
    created_at: datetime
    user_name: str | None = None
