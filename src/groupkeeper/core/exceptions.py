"""Exceptions raised by the group directory."""

from typing import Any


class GroupDirectoryError(Exception):
    """Base class for all group directory errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(GroupDirectoryError):
    """Raised when an input field is missing or malformed."""

    def __init__(self, message: str, field: str | None = None, value: Any = None) -> None:
        self.field = field
        self.value = value
        super().__init__(message)


class DuplicateNameError(GroupDirectoryError):
    """Raised when a group name is already taken."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Group with name '{name}' already exists")


class NotFoundError(GroupDirectoryError):
    """Raised when a referenced group, permission or user does not exist.

    Attributes:
        entity: Kind of the missing entity ("group", "permission" or "user").
        identifier: The id that did not resolve.
    """

    def __init__(self, entity: str, identifier: Any) -> None:
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity.capitalize()} '{identifier}' not found")


class StoreError(GroupDirectoryError):
    """Raised when the underlying store fails in an unclassified way."""
