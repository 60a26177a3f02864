"""Repositories for Organization and User records."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from orgboard.db.models.org import OrganizationRow
from orgboard.db.models.user import UserRow
from orgboard.repositories.base import BaseRepository


class OrganizationRepository(BaseRepository[OrganizationRow]):
    def __init__(self, session: AsyncSession):
        super().__init__(session, OrganizationRow)


class UserRepository(BaseRepository[UserRow]):
    def __init__(self, session: AsyncSession):
        super().__init__(session, UserRow)

    async def get_by_email(self, email: str) -> UserRow | None:
        stmt = select(UserRow).where(UserRow.email == email)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_in_org(self, user_id: str, org_id: str) -> UserRow | None:
        """Return the user only if it belongs to ``org_id``."""
        stmt = select(UserRow).where(UserRow.id == user_id, UserRow.org_id == org_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
