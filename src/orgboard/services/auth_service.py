"""Organization registration and login."""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from orgboard.errors.exceptions import AuthenticationError, ConflictError, OrgBoardError, ServerError
from orgboard.models.enums import Role
from orgboard.models.user import (
    LoginResponse,
    OrganizationResponse,
    OrgRegistration,
    RegistrationResponse,
    UserLogin,
    UserResponse,
)
from orgboard.repositories.user_repo import OrganizationRepository, UserRepository
from orgboard.security import create_access_token, hash_password, pwd_context, verify_password
from orgboard.services.id_generator import generate_id

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


async def register_organization(session: AsyncSession, body: OrgRegistration) -> RegistrationResponse:
    """Create an organization and its first admin in a single transaction.

    Both rows are committed together or not at all. A duplicate email, whether
    found by the pre-check or by the unique index under a concurrent
    registration, is a ConflictError; any other database failure is a
    ServerError. The session is rolled back before either is raised.
    """
    users = UserRepository(session)
    orgs = OrganizationRepository(session)
    try:
        if await users.get_by_email(body.email) is not None:
            raise ConflictError("User already exists")

        org = await orgs.create(id=generate_id("org_"), name=body.org_name)
        # pbkdf2 is deliberately slow; keep it off the event loop
        password_hash = await run_in_threadpool(hash_password, body.password)
        user = await users.create(
            id=generate_id("usr_"),
            name=body.user_name,
            email=body.email,
            password_hash=password_hash,
            role=Role.ORG_ADMIN.value,
            org_id=org.id,
        )
        await session.commit()
    except OrgBoardError:
        await session.rollback()
        raise
    except IntegrityError as exc:
        await session.rollback()
        logger.info("registration lost email race for %s", body.email)
        raise ConflictError("User already exists") from exc
    except SQLAlchemyError as exc:
        await session.rollback()
        logger.exception("registration rolled back")
        raise ServerError() from exc

    logger.info("organization_registered", extra={"org_id": org.id, "user_id": user.id})
    return RegistrationResponse(
        token=create_access_token(user.id, user.role, user.org_id),
        user=UserResponse.model_validate(user),
        organization=OrganizationResponse.model_validate(org),
    )


async def login(session: AsyncSession, body: UserLogin) -> LoginResponse:
    """Exchange credentials for a session token.

    Unknown emails and wrong passwords fail identically, and an unknown email
    still pays for one hash verification.
    """
    user = await UserRepository(session).get_by_email(body.email)
    if user is None:
        await run_in_threadpool(pwd_context.dummy_verify)
        raise AuthenticationError(INVALID_CREDENTIALS)
    if not await run_in_threadpool(verify_password, body.password, user.password_hash):
        raise AuthenticationError(INVALID_CREDENTIALS)

    return LoginResponse(
        token=create_access_token(user.id, user.role, user.org_id),
        user=UserResponse.model_validate(user),
    )
