"""Shared test fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from orgboard.db.base import Base
# Import all models to register with Base.metadata
import orgboard.db.models  # noqa: F401
from orgboard.db.models.user import UserRow
from orgboard.models.enums import Role
from orgboard.security import create_access_token, hash_password
from orgboard.services.activity_logger import ActivityLogger
from orgboard.services.id_generator import generate_id


@pytest.fixture
async def db_engine(tmp_path):
    """File-backed SQLite engine so request and audit sessions see the same data."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'orgboard_test.db'}", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory):
    """Create a test database session."""
    async with session_factory() as session:
        yield session


@pytest.fixture
async def activity_logger(session_factory):
    audit = ActivityLogger(session_factory)
    yield audit
    await audit.drain()


@pytest.fixture
def app(db_engine, session_factory, activity_logger):
    """Create a test application instance wired to the test database."""
    from orgboard.main import create_app

    _app = create_app()
    _app.state.db_engine = db_engine
    _app.state.db_session_factory = session_factory
    _app.state.activity_logger = activity_logger
    return _app


@pytest.fixture
async def client(app):
    """Async HTTP test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def register_org(client):
    """Return a coroutine that registers an org and returns its admin session."""

    async def _register(org_name: str = "Acme", email: str = "admin@acme.example.com") -> dict:
        r = await client.post(
            "/api/auth/register-org",
            json={
                "org_name": org_name,
                "user_name": f"{org_name} Admin",
                "email": email,
                "password": "correct-horse-battery",
            },
        )
        assert r.status_code == 201, r.text
        body = r.json()
        return {
            "token": body["token"],
            "headers": {"Authorization": f"Bearer {body['token']}"},
            "user": body["user"],
            "org": body["organization"],
        }

    return _register


@pytest.fixture
async def acme(register_org):
    return await register_org("Acme", "admin@acme.example.com")


@pytest.fixture
async def globex(register_org):
    return await register_org("Globex", "admin@globex.example.com")


@pytest.fixture
def add_member(db_session):
    """Return a coroutine that inserts a member into an org and returns its session."""

    async def _add(org_id: str, name: str = "Member", email: str | None = None) -> dict:
        user = UserRow(
            id=generate_id("usr_"),
            name=name,
            email=email or f"{generate_id('m_')}@example.com",
            password_hash=hash_password("member-password"),
            role=Role.MEMBER.value,
            org_id=org_id,
        )
        db_session.add(user)
        await db_session.commit()
        token = create_access_token(user.id, Role.MEMBER, org_id)
        return {
            "token": token,
            "headers": {"Authorization": f"Bearer {token}"},
            "user": {"id": user.id, "name": user.name, "org_id": org_id},
        }

    return _add
