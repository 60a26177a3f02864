"""Org-scoped task operations.

A task has no org_id of its own; it belongs to an organization through its
project. Every operation therefore checks the project's org before touching a
task, and checks that any assignee belongs to the same org.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from orgboard.errors.exceptions import AuthorizationError, BadRequestError, NotFoundError
from orgboard.models.enums import TaskPriority
from orgboard.models.task import TaskCreate, TaskEnvelope, TaskListItem, TaskResponse, TaskUpdate
from orgboard.repositories.project_repo import ProjectRepository
from orgboard.repositories.task_repo import TaskRepository
from orgboard.repositories.user_repo import UserRepository
from orgboard.security import AuthContext
from orgboard.services.activity_logger import ActivityLogger
from orgboard.services.id_generator import generate_id
from orgboard.services.project_service import PROJECT_NOT_FOUND

FOREIGN_ASSIGNEE = "Cannot assign task to user outside your organization"


async def _check_assignee(session: AsyncSession, caller: AuthContext, user_id: str | None) -> None:
    if user_id is None:
        return
    if await UserRepository(session).get_in_org(user_id, caller.org_id) is None:
        raise BadRequestError(FOREIGN_ASSIGNEE)


async def create_task(
    session: AsyncSession,
    caller: AuthContext,
    body: TaskCreate,
    audit: ActivityLogger,
) -> TaskEnvelope:
    project = await ProjectRepository(session).get_for_org(body.project_id, caller.org_id)
    if project is None:
        raise NotFoundError(PROJECT_NOT_FOUND)
    await _check_assignee(session, caller, body.assigned_to)

    row = await TaskRepository(session).create(
        id=generate_id("tsk_"),
        title=body.title,
        description=body.description,
        project_id=project.id,
        assigned_to=body.assigned_to,
        priority=body.priority or TaskPriority.MEDIUM.value,
        due_date=body.due_date,
    )
    await session.commit()

    audit.record(caller.org_id, caller.id, f"Created task: {row.title}")
    return TaskEnvelope(message="Task created", task=TaskResponse.model_validate(row))


async def list_tasks(
    session: AsyncSession,
    caller: AuthContext,
    project_id: str | None,
) -> list[TaskListItem]:
    """Live tasks of one project, newest first, with assignee names.

    Tasks of a soft-deleted project stay readable here.
    """
    if not project_id:
        raise BadRequestError("Project ID is required")

    project = await ProjectRepository(session).get_for_org(
        project_id, caller.org_id, include_deleted=True
    )
    if project is None:
        raise AuthorizationError("Access Denied")

    rows = await TaskRepository(session).list_for_project(project.id)
    return [
        TaskListItem.model_validate(task).model_copy(update={"assignee_name": name})
        for task, name in rows
    ]


async def update_task(
    session: AsyncSession,
    caller: AuthContext,
    task_id: str,
    body: TaskUpdate,
    audit: ActivityLogger,
) -> TaskEnvelope:
    repo = TaskRepository(session)
    row = await repo.get_for_org(task_id, caller.org_id)
    if row is None:
        raise NotFoundError("Task not found")
    await _check_assignee(session, caller, body.assigned_to)

    await repo.update(row, status=body.status, priority=body.priority, assigned_to=body.assigned_to)
    await session.commit()

    audit.record(caller.org_id, caller.id, f"Updated task: {row.title}")
    return TaskEnvelope(message="Task updated", task=TaskResponse.model_validate(row))
