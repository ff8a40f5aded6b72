"""Repository for group database operations."""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from groupkeeper.infrastructure.persistence.models import (
    GroupModel,
    GroupsPermissionsModel,
    UsersGroupsModel,
)


class GroupRepository:
    """Repository for group database operations.

    Methods flush but never commit; transaction boundaries belong to the caller.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, group: GroupModel) -> GroupModel:
        """Create a new group.

        Args:
            group: Group model to create.

        Returns:
            Created group model with its generated id.
        """
        self.session.add(group)
        await self.session.flush()
        return group

    async def get_by_id(self, group_id: int) -> GroupModel | None:
        """Get a group by ID.

        Args:
            group_id: Group ID.

        Returns:
            Group model if found, None otherwise.
        """
        result = await self.session.execute(
            select(GroupModel).where(GroupModel.id == group_id)
        )
        return result.scalar_one_or_none()

    async def get_by_name(self, name: str) -> GroupModel | None:
        """Get a group by its exact name.

        Args:
            name: Group name.

        Returns:
            Group model if found, None otherwise.
        """
        result = await self.session.execute(
            select(GroupModel).where(GroupModel.name == name)
        )
        return result.scalar_one_or_none()

    async def list_all(self) -> list[GroupModel]:
        """List all groups ordered by id."""
        result = await self.session.execute(select(GroupModel).order_by(GroupModel.id))
        return list(result.scalars().all())

    async def update(self, group: GroupModel) -> GroupModel:
        """Flush pending changes of a group.

        Args:
            group: Group model to update.

        Returns:
            Updated group model.
        """
        if group not in self.session:
            self.session.add(group)

        await self.session.flush()
        return group

    async def refresh(self, group: GroupModel) -> GroupModel:
        """Reload a group's columns from the database."""
        await self.session.refresh(group)
        return group

    async def delete_by_id(self, group_id: int) -> bool:
        """Delete a group and all of its permission and user links.

        Args:
            group_id: Group ID.

        Returns:
            True if a group row was deleted, False if none matched.
        """
        await self.session.execute(
            delete(GroupsPermissionsModel).where(GroupsPermissionsModel.group_id == group_id)
        )
        await self.session.execute(
            delete(UsersGroupsModel).where(UsersGroupsModel.group_id == group_id)
        )
        result = await self.session.execute(
            delete(GroupModel).where(GroupModel.id == group_id)
        )
        await self.session.flush()
        return result.rowcount > 0

    async def add_permission(self, group_id: int, permission_id: int) -> None:
        """Link a permission to a group.

        Args:
            group_id: Group ID.
            permission_id: Permission ID.
        """
        self.session.add(GroupsPermissionsModel(group_id=group_id, permission_id=permission_id))
        await self.session.flush()

    async def remove_permission(self, group_id: int, permission_id: int) -> bool:
        """Unlink a permission from a group.

        Returns:
            True if a link was removed, False if there was none.
        """
        result = await self.session.execute(
            delete(GroupsPermissionsModel).where(
                (GroupsPermissionsModel.group_id == group_id)
                & (GroupsPermissionsModel.permission_id == permission_id)
            )
        )
        await self.session.flush()
        return result.rowcount > 0

    async def has_permission(self, group_id: int, permission_id: int) -> bool:
        """Check if a permission is linked to a group."""
        result = await self.session.execute(
            select(GroupsPermissionsModel).where(
                (GroupsPermissionsModel.group_id == group_id)
                & (GroupsPermissionsModel.permission_id == permission_id)
            )
        )
        return result.scalar_one_or_none() is not None

    async def get_permission_ids(self, group_id: int) -> list[int]:
        """Get the ids of all permissions linked to a group."""
        result = await self.session.execute(
            select(GroupsPermissionsModel.permission_id)
            .where(GroupsPermissionsModel.group_id == group_id)
            .order_by(GroupsPermissionsModel.permission_id)
        )
        return list(result.scalars().all())

    async def add_user(self, group_id: int, user_id: int) -> None:
        """Add a user to a group.

        Args:
            group_id: Group ID.
            user_id: User ID.
        """
        self.session.add(UsersGroupsModel(user_id=user_id, group_id=group_id))
        await self.session.flush()

    async def remove_user(self, group_id: int, user_id: int) -> bool:
        """Remove a user from a group.

        Returns:
            True if a membership was removed, False if there was none.
        """
        result = await self.session.execute(
            delete(UsersGroupsModel).where(
                (UsersGroupsModel.group_id == group_id)
                & (UsersGroupsModel.user_id == user_id)
            )
        )
        await self.session.flush()
        return result.rowcount > 0

    async def has_user(self, group_id: int, user_id: int) -> bool:
        """Check if a user is in a group."""
        result = await self.session.execute(
            select(UsersGroupsModel).where(
                (UsersGroupsModel.group_id == group_id)
                & (UsersGroupsModel.user_id == user_id)
            )
        )
        return result.scalar_one_or_none() is not None

    async def get_user_ids(self, group_id: int) -> list[int]:
        """Get the ids of all users in a group."""
        result = await self.session.execute(
            select(UsersGroupsModel.user_id)
            .where(UsersGroupsModel.group_id == group_id)
            .order_by(UsersGroupsModel.user_id)
        )
        return list(result.scalars().all())
