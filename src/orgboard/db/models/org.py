"""Organization table, the tenant boundary."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from orgboard.db.base import Base, CreatedAtMixin


class OrganizationRow(Base, CreatedAtMixin):
    __tablename__ = "organizations"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
