"""Fire-and-forget writer for the activity (audit) log.

``record`` returns immediately. The insert runs in a detached asyncio task on
its own session, outside the transaction of the request that triggered it, so
a failed audit write can neither roll back nor delay the business mutation.
Failures are logged and counted, never raised.
"""

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from orgboard.repositories.activity_log_repo import ActivityLogRepository
from orgboard.services.id_generator import generate_id

logger = logging.getLogger(__name__)


class ActivityLogger:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory
        self._pending: set[asyncio.Task] = set()
        self.failures = 0

    @property
    def pending(self) -> int:
        return len(self._pending)

    def record(self, org_id: str, user_id: str | None, action: str) -> asyncio.Task:
        """Schedule an audit entry and return without waiting for it."""
        task = asyncio.create_task(self._write(org_id, user_id, action))
        # The event loop keeps only weak references to tasks.
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _write(self, org_id: str, user_id: str | None, action: str) -> None:
        try:
            async with self._session_factory() as session:
                await ActivityLogRepository(session).append(
                    id=generate_id("log_"),
                    org_id=org_id,
                    user_id=user_id,
                    action=action,
                )
                await session.commit()
        except Exception:
            self.failures += 1
            logger.exception(
                "activity_log_write_failed",
                extra={"org_id": org_id, "user_id": user_id, "action": action},
            )

    async def drain(self) -> None:
        """Wait for every scheduled write to finish (shutdown and tests)."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)
