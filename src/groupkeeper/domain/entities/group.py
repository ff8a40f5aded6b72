"""Group entity returned by the group directory.

A group is a named collection of permission and user links. The entity is a
snapshot of the stored row plus the ids on both sides of its links.
"""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Group:
    """Snapshot of a group and its links.

    Attributes:
        id: Unique identifier.
        name: Group name (unique across groups).
        description: Description, empty string when not given.
        permission_ids: Ids of the permissions linked to the group.
        user_ids: Ids of the users in the group.
        created_at: Timestamp when the group was created.
        updated_at: Timestamp when the group was last updated.
    """

    id: int
    name: str
    description: str = ""
    permission_ids: frozenset[int] = field(default_factory=frozenset)
    user_ids: frozenset[int] = field(default_factory=frozenset)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate group data after initialization."""
        if not self.name:
            raise ValueError("Group name is required")
        self.permission_ids = frozenset(self.permission_ids)
        self.user_ids = frozenset(self.user_ids)

    def has_permission(self, permission_id: int) -> bool:
        return permission_id in self.permission_ids

    def has_user(self, user_id: int) -> bool:
        return user_id in self.user_ids
