"""Group directory service.

Creates, updates and deletes groups and manages the links between groups
and permissions and between groups and users. Every mutation runs as one
transaction on the injected session: it commits on success, and rolls back
before raising on failure. Lookups read inside the caller's transaction and
never commit or roll it back.

Adding a link that already exists and removing a link that does not exist
both succeed without touching the store.
"""

from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from groupkeeper.core.exceptions import (
    DuplicateNameError,
    GroupDirectoryError,
    NotFoundError,
    StoreError,
)
from groupkeeper.core.logging import get_logger
from groupkeeper.domain.entities.group import Group
from groupkeeper.domain.services.group_validator import validate_create, validate_update
from groupkeeper.infrastructure.persistence.models import GroupModel
from groupkeeper.infrastructure.persistence.repositories import (
    GroupRepository,
    PermissionRepository,
    UserRepository,
)

logger = get_logger(__name__)

EdgeCheck = Callable[[int, int], Awaitable[bool]]
EdgeMutation = Callable[[int, int], Awaitable[Any]]
Lookup = Callable[[int], Awaitable[Any]]


class GroupDirectory:
    """Service for group management and group link business logic."""

    def __init__(
        self,
        session: AsyncSession,
        group_repo: GroupRepository | None = None,
        permission_repo: PermissionRepository | None = None,
        user_repo: UserRepository | None = None,
    ) -> None:
        """Initialize the group directory.

        Args:
            session: SQLAlchemy async session; owns the transaction of each call.
            group_repo: Group repository, built from the session if omitted.
            permission_repo: Permission lookups, built from the session if omitted.
            user_repo: User lookups, built from the session if omitted.
        """
        self.session = session
        self.group_repo = group_repo or GroupRepository(session)
        self.permission_repo = permission_repo or PermissionRepository(session)
        self.user_repo = user_repo or UserRepository(session)

    @asynccontextmanager
    async def _transaction(self, operation: str, **context: Any) -> AsyncIterator[None]:
        try:
            yield
            await self.session.commit()
        except GroupDirectoryError as e:
            await self.session.rollback()
            logger.warning(
                "Group directory operation rejected",
                operation=operation,
                error=e.message,
                **context,
            )
            raise
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(
                "Group directory store failure",
                operation=operation,
                error=str(e),
                **context,
            )
            raise StoreError(f"Group {operation} failed: {e}") from e

    @asynccontextmanager
    async def _lookup(self, operation: str, **context: Any) -> AsyncIterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            logger.error(
                "Group directory store failure",
                operation=operation,
                error=str(e),
                **context,
            )
            raise StoreError(f"Group {operation} failed: {e}") from e

    async def _snapshot(self, group: GroupModel) -> Group:
        return Group(
            id=group.id,
            name=group.name,
            description=group.description or "",
            permission_ids=await self.group_repo.get_permission_ids(group.id),
            user_ids=await self.group_repo.get_user_ids(group.id),
            created_at=group.created_at,
            updated_at=group.updated_at,
        )

    async def _require_group(self, group_id: int) -> GroupModel:
        group = await self.group_repo.get_by_id(group_id)
        if group is None:
            raise NotFoundError("group", group_id)
        return group

    async def create(self, group_name: str, description: str | None = "") -> Group:
        """Create a new group.

        Args:
            group_name: Group name, required and unique.
            description: Optional description; defaults to an empty string.

        Returns:
            The created group.

        Raises:
            ValidationError: If the name is empty or a field is malformed.
            DuplicateNameError: If a group with this name already exists.
            StoreError: If the store fails.
        """
        async with self._transaction("create", name=group_name):
            data = validate_create(group_name, description)

            if await self.group_repo.get_by_name(data.name) is not None:
                raise DuplicateNameError(data.name)

            try:
                group = await self.group_repo.create(
                    GroupModel(name=data.name, description=data.description)
                )
            except IntegrityError as e:
                raise DuplicateNameError(data.name) from e

            await self.group_repo.refresh(group)
            result = await self._snapshot(group)

        logger.info("Group created", group_id=result.id, name=result.name)
        return result

    async def update(
        self,
        group_id: int,
        group_name: str | None = None,
        description: str | None = None,
    ) -> Group:
        """Update a group's name and/or description.

        Falsy values (None or empty string) mean "not provided" and leave the
        field unchanged.

        Args:
            group_id: Group ID.
            group_name: New name, if any.
            description: New description, if any.

        Returns:
            The group as stored after the update.

        Raises:
            NotFoundError: If the group does not exist.
            DuplicateNameError: If the new name belongs to another group.
            ValidationError: If a supplied field is malformed.
            StoreError: If the store fails.
        """
        async with self._transaction("update", group_id=group_id):
            data = validate_update(group_name or None, description or None)
            group = await self._require_group(group_id)

            changed: list[str] = []
            if data.name is not None and data.name != group.name:
                existing = await self.group_repo.get_by_name(data.name)
                if existing is not None and existing.id != group.id:
                    raise DuplicateNameError(data.name)
                group.name = data.name
                changed.append("name")

            if data.description is not None and data.description != group.description:
                group.description = data.description
                changed.append("description")

            if changed:
                try:
                    await self.group_repo.update(group)
                except IntegrityError as e:
                    raise DuplicateNameError(group.name) from e

            await self.group_repo.refresh(group)
            result = await self._snapshot(group)

        logger.info("Group updated", group_id=group_id, fields=changed)
        return result

    async def find_all(self) -> list[Group]:
        """Return every group, ordered by id."""
        async with self._lookup("find_all"):
            groups = await self.group_repo.list_all()
            result = [await self._snapshot(group) for group in groups]
        return result

    async def find_by_id(self, group_id: int) -> Group | None:
        """Find a group by id.

        Returns:
            The group, or None if no group has this id.
        """
        async with self._lookup("find_by_id", group_id=group_id):
            group = await self.group_repo.get_by_id(group_id)
            result = await self._snapshot(group) if group is not None else None
        return result

    async def find_by_name(self, group_name: str) -> Group | None:
        """Find a group by its exact name.

        Returns:
            The group, or None if no group has this name.
        """
        async with self._lookup("find_by_name", name=group_name):
            group = await self.group_repo.get_by_name(group_name)
            result = await self._snapshot(group) if group is not None else None
        return result

    async def _link(
        self,
        operation: str,
        group_id: int,
        entity: str,
        linked_id: int,
        lookup: Lookup,
        exists: EdgeCheck,
        add: EdgeMutation,
    ) -> Group:
        async with self._transaction(operation, group_id=group_id, **{f"{entity}_id": linked_id}):
            group = await self._require_group(group_id)
            if await lookup(linked_id) is None:
                raise NotFoundError(entity, linked_id)

            if not await exists(group_id, linked_id):
                try:
                    await add(group_id, linked_id)
                except IntegrityError:
                    # Lost a race against an identical insert; the link is there
                    await self.session.rollback()
                    if not await exists(group_id, linked_id):
                        raise
                    group = await self._require_group(group_id)
                else:
                    logger.info("Group link added", group_id=group_id, entity=entity, linked_id=linked_id)

            result = await self._snapshot(group)
        return result

    async def _unlink(
        self,
        operation: str,
        group_id: int,
        entity: str,
        linked_id: int,
        lookup: Lookup,
        remove: EdgeMutation,
    ) -> Group:
        async with self._transaction(operation, group_id=group_id, **{f"{entity}_id": linked_id}):
            group = await self._require_group(group_id)
            if await lookup(linked_id) is None:
                raise NotFoundError(entity, linked_id)

            if await remove(group_id, linked_id):
                logger.info("Group link removed", group_id=group_id, entity=entity, linked_id=linked_id)

            result = await self._snapshot(group)
        return result

    async def add_permission(self, group_id: int, permission_id: int) -> Group:
        """Link a permission to a group.

        Raises:
            NotFoundError: If the group (checked first) or the permission does not exist.
            StoreError: If the store fails.
        """
        return await self._link(
            "add_permission",
            group_id,
            "permission",
            permission_id,
            self.permission_repo.get_by_id,
            self.group_repo.has_permission,
            self.group_repo.add_permission,
        )

    async def remove_permission(self, group_id: int, permission_id: int) -> Group:
        """Unlink a permission from a group.

        Raises:
            NotFoundError: If the group (checked first) or the permission does not exist.
            StoreError: If the store fails.
        """
        return await self._unlink(
            "remove_permission",
            group_id,
            "permission",
            permission_id,
            self.permission_repo.get_by_id,
            self.group_repo.remove_permission,
        )

    async def add_user(self, group_id: int, user_id: int) -> Group:
        """Add a user to a group.

        Raises:
            NotFoundError: If the group (checked first) or the user does not exist.
            StoreError: If the store fails.
        """
        return await self._link(
            "add_user",
            group_id,
            "user",
            user_id,
            self.user_repo.get_by_id,
            self.group_repo.has_user,
            self.group_repo.add_user,
        )

    async def remove_user(self, group_id: int, user_id: int) -> Group:
        """Remove a user from a group.

        Raises:
            NotFoundError: If the group (checked first) or the user does not exist.
            StoreError: If the store fails.
        """
        return await self._unlink(
            "remove_user",
            group_id,
            "user",
            user_id,
            self.user_repo.get_by_id,
            self.group_repo.remove_user,
        )

    async def delete(self, group_id: int) -> bool:
        """Delete a group together with its permission and user links.

        Returns:
            True if the group existed and was deleted, False otherwise.

        Raises:
            StoreError: If the store fails.
        """
        async with self._transaction("delete", group_id=group_id):
            deleted = await self.group_repo.delete_by_id(group_id)

        if deleted:
            logger.info("Group deleted", group_id=group_id)
        return deleted
