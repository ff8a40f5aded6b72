"""SQLAlchemy model for the permissions table.

Permission rows are owned by another part of the system; groups only
reference them by id.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from groupkeeper.infrastructure.persistence.database import Base


class PermissionModel(Base):
    """SQLAlchemy model for the permissions table."""

    __tablename__ = "permissions"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        comment="Permission name",
    )

    def __repr__(self) -> str:
        return f"<Permission(id={self.id}, name={self.name})>"
