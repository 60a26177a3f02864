"""Task endpoint tests: dual ownership checks, assignee join, coalesce updates."""

import pytest
from sqlalchemy import func, select

from orgboard.db.models.task import TaskRow


@pytest.fixture
async def acme_project(client, acme) -> dict:
    r = await client.post(
        "/api/projects",
        json={"name": "Roadrunner", "description": "Catch it"},
        headers=acme["headers"],
    )
    return r.json()["project"]


async def _task_count(db_session) -> int:
    return (await db_session.execute(select(func.count()).select_from(TaskRow))).scalar_one()


async def _create_task(client, session, project_id, **fields) -> dict:
    r = await client.post(
        "/api/tasks",
        json={"title": "Buy anvil", "description": "Large", "project_id": project_id, **fields},
        headers=session["headers"],
    )
    assert r.status_code == 201, r.text
    return r.json()["task"]


# ---------------------------------------------------------------------------
# Create
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_member_creates_task_with_default_priority(client, acme, acme_project, add_member):
    member = await add_member(acme["org"]["id"])
    r = await client.post(
        "/api/tasks",
        json={"title": "Buy anvil", "project_id": acme_project["id"], "due_date": "2026-12-01"},
        headers=member["headers"],
    )
    assert r.status_code == 201
    body = r.json()
    assert body["message"] == "Task created"
    task = body["task"]
    assert task["id"].startswith("tsk_")
    assert task["priority"] == "medium"
    assert task["status"] == "todo"
    assert task["due_date"] == "2026-12-01"
    assert task["assigned_to"] is None


@pytest.mark.asyncio
async def test_create_task_in_other_org_project_is_not_found(client, globex, acme_project, db_session):
    r = await client.post(
        "/api/tasks",
        json={"title": "Sabotage", "project_id": acme_project["id"]},
        headers=globex["headers"],
    )
    assert r.status_code == 404
    assert await _task_count(db_session) == 0


@pytest.mark.asyncio
async def test_create_task_with_foreign_assignee_is_rejected(client, acme, globex, acme_project, db_session):
    r = await client.post(
        "/api/tasks",
        json={
            "title": "Outsource",
            "project_id": acme_project["id"],
            "assigned_to": globex["user"]["id"],
        },
        headers=acme["headers"],
    )
    assert r.status_code == 400
    assert r.json() == {"message": "Cannot assign task to user outside your organization"}
    assert await _task_count(db_session) == 0


@pytest.mark.asyncio
async def test_create_task_rejects_unknown_priority(client, acme, acme_project):
    r = await client.post(
        "/api/tasks",
        json={"title": "Panic", "project_id": acme_project["id"], "priority": "urgent"},
        headers=acme["headers"],
    )
    assert r.status_code == 400
    assert "priority" in r.json()["message"]


@pytest.mark.asyncio
async def test_create_task_in_deleted_project_is_not_found(client, acme, acme_project):
    await client.delete(f"/api/projects/{acme_project['id']}", headers=acme["headers"])
    r = await client.post(
        "/api/tasks",
        json={"title": "Too late", "project_id": acme_project["id"]},
        headers=acme["headers"],
    )
    assert r.status_code == 404


# ---------------------------------------------------------------------------
# List
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_list_requires_project_id(client, acme):
    r = await client.get("/api/tasks", headers=acme["headers"])
    assert r.status_code == 400
    assert r.json() == {"message": "Project ID is required"}


@pytest.mark.asyncio
async def test_list_other_org_project_is_forbidden(client, globex, acme_project):
    r = await client.get("/api/tasks", params={"projectId": acme_project["id"]}, headers=globex["headers"])
    assert r.status_code == 403
    assert r.json() == {"message": "Access Denied"}


@pytest.mark.asyncio
async def test_list_joins_assignee_name_newest_first(client, acme, acme_project, add_member):
    member = await add_member(acme["org"]["id"], name="Wile E. Coyote")
    first = await _create_task(client, acme, acme_project["id"], title="Unassigned")
    second = await _create_task(
        client, acme, acme_project["id"], title="Assigned", assigned_to=member["user"]["id"]
    )

    r = await client.get("/api/tasks", params={"projectId": acme_project["id"]}, headers=acme["headers"])
    assert r.status_code == 200
    tasks = r.json()
    assert [t["id"] for t in tasks] == [second["id"], first["id"]]
    assert tasks[0]["assignee_name"] == "Wile E. Coyote"
    assert tasks[1]["assignee_name"] is None


@pytest.mark.asyncio
async def test_tasks_of_deleted_project_are_read_only(client, acme, acme_project):
    task = await _create_task(client, acme, acme_project["id"])
    await client.delete(f"/api/projects/{acme_project['id']}", headers=acme["headers"])

    listing = await client.get("/api/tasks", params={"projectId": acme_project["id"]}, headers=acme["headers"])
    assert [t["id"] for t in listing.json()] == [task["id"]]

    update = await client.patch(f"/api/tasks/{task['id']}", json={"status": "done"}, headers=acme["headers"])
    assert update.status_code == 404


# ---------------------------------------------------------------------------
# Update
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_partial_update_keeps_other_fields(client, acme, acme_project, add_member):
    member = await add_member(acme["org"]["id"])
    task = await _create_task(
        client, acme, acme_project["id"], priority="high", assigned_to=member["user"]["id"]
    )

    r = await client.patch(f"/api/tasks/{task['id']}", json={"status": "in_progress"}, headers=member["headers"])
    assert r.status_code == 200
    assert r.json()["message"] == "Task updated"
    updated = r.json()["task"]
    assert updated["status"] == "in_progress"
    assert updated["priority"] == "high"
    assert updated["assigned_to"] == member["user"]["id"]
    assert updated["title"] == task["title"]


@pytest.mark.asyncio
async def test_update_other_org_task_is_not_found(client, acme, globex, acme_project):
    task = await _create_task(client, acme, acme_project["id"])
    r = await client.patch(f"/api/tasks/{task['id']}", json={"status": "done"}, headers=globex["headers"])
    assert r.status_code == 404
    assert r.json() == {"message": "Task not found"}


@pytest.mark.asyncio
async def test_update_rejects_foreign_assignee(client, acme, globex, acme_project, db_session):
    task = await _create_task(client, acme, acme_project["id"])
    r = await client.patch(
        f"/api/tasks/{task['id']}",
        json={"assigned_to": globex["user"]["id"]},
        headers=acme["headers"],
    )
    assert r.status_code == 400

    row = (await db_session.execute(select(TaskRow).where(TaskRow.id == task["id"]))).scalar_one()
    assert row.assigned_to is None


@pytest.mark.asyncio
async def test_update_reassigns_within_org(client, acme, acme_project, add_member):
    member = await add_member(acme["org"]["id"], name="Road Runner")
    task = await _create_task(client, acme, acme_project["id"])
    r = await client.patch(
        f"/api/tasks/{task['id']}",
        json={"assigned_to": member["user"]["id"], "priority": "low"},
        headers=acme["headers"],
    )
    assert r.status_code == 200
    assert r.json()["task"]["assigned_to"] == member["user"]["id"]
    assert r.json()["task"]["priority"] == "low"
    assert r.json()["task"]["status"] == "todo"
