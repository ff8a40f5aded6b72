"""Domain services for Groupkeeper."""

from groupkeeper.domain.services.group_directory import GroupDirectory
from groupkeeper.domain.services.group_validator import GroupCreate, GroupUpdate

__all__ = [
    "GroupCreate",
    "GroupDirectory",
    "GroupUpdate",
]
