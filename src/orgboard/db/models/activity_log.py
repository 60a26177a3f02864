"""Append-only activity log table."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from orgboard.db.base import Base, CreatedAtMixin


class ActivityLogRow(Base, CreatedAtMixin):
    __tablename__ = "activity_logs"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    # No foreign keys: entries outlive the users and orgs they mention.
    org_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    user_id: Mapped[str | None] = mapped_column(String(64), nullable=True)
    action: Mapped[str] = mapped_column(Text, nullable=False)
