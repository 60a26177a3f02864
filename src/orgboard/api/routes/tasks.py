"""Task routes. Open to every member of the owning organization."""

from fastapi import APIRouter

from orgboard.dependencies import AuditLog, CurrentUser, DBSession
from orgboard.models.task import TaskCreate, TaskEnvelope, TaskListItem, TaskUpdate
from orgboard.services import task_service

router = APIRouter(prefix="/tasks", tags=["Tasks"])


@router.post("", response_model=TaskEnvelope, status_code=201)
async def create_task(body: TaskCreate, user: CurrentUser, db: DBSession, audit: AuditLog):
    return await task_service.create_task(db, user, body, audit)


@router.get("", response_model=list[TaskListItem])
async def list_tasks(user: CurrentUser, db: DBSession, projectId: str | None = None):
    # projectId is optional here so a missing value gets the domain 400 message
    return await task_service.list_tasks(db, user, projectId)


@router.patch("/{task_id}", response_model=TaskEnvelope)
async def update_task(
    task_id: str,
    body: TaskUpdate,
    user: CurrentUser,
    db: DBSession,
    audit: AuditLog,
):
    return await task_service.update_task(db, user, task_id, body, audit)
