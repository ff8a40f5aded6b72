"""SQLAlchemy model for the groups table.

Groups collect permissions and users for access-control purposes.
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from groupkeeper.infrastructure.persistence.database import Base


class GroupModel(Base):
    """SQLAlchemy model for the groups table.

    Attributes:
        id: Auto-incrementing primary key.
        name: Group name (unique across all groups).
        description: Description, empty string when not given.
        created_at: Timestamp when the group was created.
        updated_at: Timestamp when the group was last updated.
    """

    __tablename__ = "groups"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        unique=True,
        index=True,
        comment="Group name",
    )
    description: Mapped[str] = mapped_column(
        String(500),
        nullable=False,
        default="",
        server_default="",
        comment="Description of the group's purpose",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    def __repr__(self) -> str:
        return f"<Group(id={self.id}, name={self.name})>"
