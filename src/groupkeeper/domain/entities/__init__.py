"""Domain entities for Groupkeeper.

Entities are pure Python dataclasses with no infrastructure dependencies.
"""

from groupkeeper.domain.entities.group import Group

__all__ = ["Group"]
