"""Org-scoped project operations."""

import math

from sqlalchemy.ext.asyncio import AsyncSession

from orgboard.errors.exceptions import NotFoundError
from orgboard.models.project import (
    Pagination,
    ProjectCreate,
    ProjectEnvelope,
    ProjectPage,
    ProjectResponse,
    ProjectUpdate,
)
from orgboard.repositories.project_repo import ProjectRepository
from orgboard.security import AuthContext
from orgboard.services.activity_logger import ActivityLogger
from orgboard.services.id_generator import generate_id

PROJECT_NOT_FOUND = "Project not found or access denied"


async def create_project(
    session: AsyncSession,
    caller: AuthContext,
    body: ProjectCreate,
    audit: ActivityLogger,
) -> ProjectEnvelope:
    repo = ProjectRepository(session)
    row = await repo.create(
        id=generate_id("prj_"),
        name=body.name,
        description=body.description,
        org_id=caller.org_id,
    )
    await session.commit()

    audit.record(caller.org_id, caller.id, f"Created project: {row.name}")
    return ProjectEnvelope(
        message="Project created successfully",
        project=ProjectResponse.model_validate(row),
    )


async def list_projects(
    session: AsyncSession,
    caller: AuthContext,
    page: int = 1,
    limit: int = 5,
) -> ProjectPage:
    """One page of the caller's live projects, newest first."""
    repo = ProjectRepository(session)
    rows = await repo.list_page(caller.org_id, limit=limit, offset=(page - 1) * limit)
    total = await repo.count_active(caller.org_id)
    return ProjectPage(
        data=[ProjectResponse.model_validate(r) for r in rows],
        pagination=Pagination(
            total=total,
            currentPage=page,
            limit=limit,
            totalPages=math.ceil(total / limit),
        ),
    )


async def update_project(
    session: AsyncSession,
    caller: AuthContext,
    project_id: str,
    body: ProjectUpdate,
    audit: ActivityLogger,
) -> ProjectEnvelope:
    repo = ProjectRepository(session)
    row = await repo.get_for_org(project_id, caller.org_id)
    if row is None:
        raise NotFoundError(PROJECT_NOT_FOUND)

    await repo.touch(row, name=body.name, description=body.description, status=body.status)
    await session.commit()

    audit.record(caller.org_id, caller.id, f"Updated project: {row.name}")
    return ProjectEnvelope(message="Project updated", project=ProjectResponse.model_validate(row))


async def delete_project(
    session: AsyncSession,
    caller: AuthContext,
    project_id: str,
    audit: ActivityLogger,
) -> ProjectEnvelope:
    """Soft delete: the row stays for history but leaves every listing."""
    repo = ProjectRepository(session)
    row = await repo.get_for_org(project_id, caller.org_id)
    if row is None:
        raise NotFoundError(PROJECT_NOT_FOUND)

    await repo.soft_delete(row)
    await session.commit()

    audit.record(caller.org_id, caller.id, f"Deleted project: {row.name}")
    return ProjectEnvelope(
        message="Project deleted successfully",
        project=ProjectResponse.model_validate(row),
    )
