"""Permission repository for database operations."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from groupkeeper.infrastructure.persistence.models import PermissionModel


class PermissionRepository:
    """Read-only lookups of permissions referenced by groups."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_id(self, permission_id: int) -> PermissionModel | None:
        """Get a permission by ID.

        Args:
            permission_id: Permission ID.

        Returns:
            Permission model if found, None otherwise.
        """
        result = await self.session.execute(
            select(PermissionModel).where(PermissionModel.id == permission_id)
        )
        return result.scalar_one_or_none()
