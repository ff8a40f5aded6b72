"""SQLAlchemy models for Groupkeeper tables.

All models inherit from the Base class defined in database.py.
"""

from groupkeeper.infrastructure.persistence.models.group import GroupModel
from groupkeeper.infrastructure.persistence.models.groups_permissions import (
    GroupsPermissionsModel,
)
from groupkeeper.infrastructure.persistence.models.permission import PermissionModel
from groupkeeper.infrastructure.persistence.models.user import UserModel
from groupkeeper.infrastructure.persistence.models.users_groups import UsersGroupsModel

__all__ = [
    "GroupModel",
    "GroupsPermissionsModel",
    "PermissionModel",
    "UserModel",
    "UsersGroupsModel",
]
