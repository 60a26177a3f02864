"""SQLAlchemy ORM models - import all to register with Base.metadata."""

from orgboard.db.models.org import OrganizationRow
from orgboard.db.models.user import UserRow
from orgboard.db.models.project import ProjectRow
from orgboard.db.models.task import TaskRow
from orgboard.db.models.activity_log import ActivityLogRow

__all__ = [
    "OrganizationRow",
    "UserRow",
    "ProjectRow",
    "TaskRow",
    "ActivityLogRow",
]
