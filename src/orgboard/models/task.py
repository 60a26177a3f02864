"""Pydantic models for tasks."""

from datetime import date, datetime

from pydantic import BaseModel, Field

from orgboard.models.enums import TaskPriority


class TaskCreate(BaseModel):
    model_config = {"use_enum_values": True}

    title: str = Field(min_length=1, max_length=300)
    description: str | None = None
    project_id: str = Field(min_length=1)
    assigned_to: str | None = None
    priority: TaskPriority | None = None
    due_date: date | None = None


class TaskUpdate(BaseModel):
    """Partial update. Omitted or null fields keep their stored value."""

    model_config = {"use_enum_values": True}

    status: str | None = Field(None, min_length=1, max_length=50)
    priority: TaskPriority | None = None
    assigned_to: str | None = None


class TaskResponse(BaseModel):
    id: str
    title: str
    description: str | None
    project_id: str
    assigned_to: str | None
    priority: TaskPriority
    status: str
    due_date: date | None
    is_deleted: bool
    created_at: datetime

    model_config = {"from_attributes": True}


class TaskListItem(TaskResponse):
    assignee_name: str | None = None


class TaskEnvelope(BaseModel):
    message: str
    task: TaskResponse
