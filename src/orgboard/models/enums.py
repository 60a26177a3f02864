"""String enums shared by the ORM rows and the API models."""

from enum import StrEnum


class Role(StrEnum):
    ORG_ADMIN = "org_admin"
    MEMBER = "member"


class TaskPriority(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
