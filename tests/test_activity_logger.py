"""Unit tests for the fire-and-forget activity logger."""

import asyncio

import pytest
from sqlalchemy import select

from orgboard.db.models.activity_log import ActivityLogRow
from orgboard.services.activity_logger import ActivityLogger


@pytest.mark.asyncio
async def test_record_returns_before_the_write_lands(session_factory, db_session):
    audit = ActivityLogger(session_factory)
    task = audit.record("org_1", "usr_1", "Created project: Quick")

    assert isinstance(task, asyncio.Task)
    assert not task.done()
    assert audit.pending == 1

    await audit.drain()
    assert audit.pending == 0
    rows = (await db_session.execute(select(ActivityLogRow))).scalars().all()
    assert [(r.org_id, r.user_id, r.action) for r in rows] == [("org_1", "usr_1", "Created project: Quick")]


@pytest.mark.asyncio
async def test_write_failure_is_logged_and_swallowed(caplog):
    def broken_factory():
        raise RuntimeError("pool exhausted")

    audit = ActivityLogger(broken_factory)
    task = audit.record("org_1", "usr_1", "Created task: Doomed")
    await audit.drain()

    assert task.exception() is None
    assert audit.failures == 1
    assert "activity_log_write_failed" in caplog.text


@pytest.mark.asyncio
async def test_drain_with_nothing_pending_returns(session_factory):
    audit = ActivityLogger(session_factory)
    await audit.drain()
    assert audit.failures == 0
