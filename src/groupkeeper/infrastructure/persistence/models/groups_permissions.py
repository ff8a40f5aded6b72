"""SQLAlchemy model for the groups_permissions junction table.

Implements the many-to-many relationship between groups and permissions.
"""

from sqlalchemy import ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from groupkeeper.infrastructure.persistence.database import Base


class GroupsPermissionsModel(Base):
    """Junction table for many-to-many relationship between groups and permissions.

    Attributes:
        group_id: Foreign key to groups table.
        permission_id: Foreign key to permissions table.
    """

    __tablename__ = "groups_permissions"

    group_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("groups.id", ondelete="CASCADE"),
        primary_key=True,
        comment="Foreign key to groups table",
    )
    permission_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("permissions.id", ondelete="CASCADE"),
        primary_key=True,
        comment="Foreign key to permissions table",
    )

    def __repr__(self) -> str:
        return f"<GroupsPermissions(group_id={self.group_id}, permission_id={self.permission_id})>"
