"""Project routes. Reads are open to org members, writes to org admins."""

from fastapi import APIRouter, Query

from orgboard.config import settings
from orgboard.dependencies import AdminUser, AuditLog, CurrentUser, DBSession
from orgboard.models.project import ProjectCreate, ProjectEnvelope, ProjectPage, ProjectUpdate
from orgboard.services import project_service

router = APIRouter(prefix="/projects", tags=["Projects"])


@router.get("", response_model=ProjectPage)
async def list_projects(
    user: CurrentUser,
    db: DBSession,
    page: int = Query(1, ge=1),
    limit: int = Query(5, ge=1, le=settings.max_page_size),
):
    return await project_service.list_projects(db, user, page=page, limit=limit)


@router.post("", response_model=ProjectEnvelope, status_code=201)
async def create_project(body: ProjectCreate, user: AdminUser, db: DBSession, audit: AuditLog):
    return await project_service.create_project(db, user, body, audit)


@router.patch("/{project_id}", response_model=ProjectEnvelope)
async def update_project(
    project_id: str,
    body: ProjectUpdate,
    user: AdminUser,
    db: DBSession,
    audit: AuditLog,
):
    return await project_service.update_project(db, user, project_id, body, audit)


@router.delete("/{project_id}", response_model=ProjectEnvelope)
async def delete_project(project_id: str, user: AdminUser, db: DBSession, audit: AuditLog):
    return await project_service.delete_project(db, user, project_id, audit)
