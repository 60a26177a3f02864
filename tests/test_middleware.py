"""Request context binding by the trace and auth middlewares."""

import pytest
import structlog
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from orgboard.api.middleware.auth import AuthMiddleware
from orgboard.api.middleware.trace_id import TraceIdMiddleware
from orgboard.models.enums import Role
from orgboard.security import create_access_token


@pytest.fixture
async def context_client():
    app = FastAPI()
    app.add_middleware(AuthMiddleware)
    app.add_middleware(TraceIdMiddleware)

    @app.get("/context")
    async def _context():
        return structlog.contextvars.get_contextvars()

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.mark.asyncio
async def test_authenticated_request_binds_caller_to_log_context(context_client):
    token = create_access_token("usr_ctx", Role.MEMBER, "org_ctx")
    r = await context_client.get(
        "/context",
        headers={"Authorization": f"Bearer {token}", "X-Trace-Id": "trc_ctx_0001"},
    )
    assert r.json() == {"trace_id": "trc_ctx_0001", "user_id": "usr_ctx", "org_id": "org_ctx"}


@pytest.mark.asyncio
async def test_anonymous_request_binds_only_trace_id(context_client):
    r = await context_client.get("/context", headers={"X-Trace-Id": "trc_ctx_0002"})
    assert r.json() == {"trace_id": "trc_ctx_0002"}
