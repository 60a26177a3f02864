"""Pydantic models for projects."""

from datetime import datetime

from pydantic import BaseModel, Field


class ProjectCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    description: str | None = None


class ProjectUpdate(BaseModel):
    """Partial update. Omitted or null fields keep their stored value."""

    name: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    status: str | None = Field(None, min_length=1, max_length=50)


class ProjectResponse(BaseModel):
    id: str
    name: str
    description: str | None
    status: str
    org_id: str
    is_deleted: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class Pagination(BaseModel):
    total: int
    currentPage: int
    limit: int
    totalPages: int


class ProjectPage(BaseModel):
    data: list[ProjectResponse]
    pagination: Pagination


class ProjectEnvelope(BaseModel):
    message: str
    project: ProjectResponse
