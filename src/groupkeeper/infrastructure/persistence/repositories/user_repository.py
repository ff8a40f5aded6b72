"""User repository for database operations."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from groupkeeper.infrastructure.persistence.models import UserModel


class UserRepository:
    """Read-only lookups of users referenced by groups."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_id(self, user_id: int) -> UserModel | None:
        """Get a user by ID.

        Args:
            user_id: User ID.

        Returns:
            User model if found, None otherwise.
        """
        result = await self.session.execute(select(UserModel).where(UserModel.id == user_id))
        return result.scalar_one_or_none()
