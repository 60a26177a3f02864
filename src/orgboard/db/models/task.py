"""Task table."""

from datetime import date

from sqlalchemy import Boolean, Date, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from orgboard.db.base import Base, CreatedAtMixin
from orgboard.models.enums import TaskPriority


class TaskRow(Base, CreatedAtMixin):
    __tablename__ = "tasks"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    title: Mapped[str] = mapped_column(String(300), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    project_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("projects.id"), nullable=False, index=True
    )
    assigned_to: Mapped[str | None] = mapped_column(
        String(64), ForeignKey("users.id"), nullable=True, index=True
    )
    priority: Mapped[str] = mapped_column(String(16), nullable=False, default=TaskPriority.MEDIUM.value)
    status: Mapped[str] = mapped_column(String(50), nullable=False, default="todo")
    due_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    is_deleted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
