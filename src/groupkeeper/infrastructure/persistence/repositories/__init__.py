"""Persistence repositories for database operations."""

from groupkeeper.infrastructure.persistence.repositories.group_repository import (
    GroupRepository,
)
from groupkeeper.infrastructure.persistence.repositories.permission_repository import (
    PermissionRepository,
)
from groupkeeper.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = [
    "GroupRepository",
    "PermissionRepository",
    "UserRepository",
]
