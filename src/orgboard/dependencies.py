"""FastAPI dependency injection providers."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from orgboard.api.middleware.auth import NO_TOKEN
from orgboard.errors.exceptions import AuthenticationError, AuthorizationError
from orgboard.models.enums import Role
from orgboard.security import AuthContext
from orgboard.services.activity_logger import ActivityLogger


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Yield a database session from the app's session factory.

    The session is closed, and its connection returned to the pool, on every
    exit path of the request.
    """
    session_factory = request.app.state.db_session_factory
    async with session_factory() as session:
        yield session


def get_activity_logger(request: Request) -> ActivityLogger:
    """Return the process-wide audit writer from app state."""
    return request.app.state.activity_logger


async def get_current_user(request: Request) -> AuthContext:
    """Return the caller decoded by AuthMiddleware or raise 401."""
    auth = getattr(request.state, "auth", None)
    if auth is None:
        raise AuthenticationError(getattr(request.state, "auth_error", None) or NO_TOKEN)
    return auth


def require_role(*roles: Role, message: str = "Access Denied: Admins Only"):
    """Return a dependency that enforces one of the given roles."""

    async def _check(user: AuthContext = Depends(get_current_user)) -> AuthContext:
        if user.role not in roles:
            raise AuthorizationError(message)
        return user

    return _check


# Type aliases for dependency injection
DBSession = Annotated[AsyncSession, Depends(get_db)]
AuditLog = Annotated[ActivityLogger, Depends(get_activity_logger)]
CurrentUser = Annotated[AuthContext, Depends(get_current_user)]
AdminUser = Annotated[AuthContext, Depends(require_role(Role.ORG_ADMIN))]
