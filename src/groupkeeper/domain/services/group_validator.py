"""Validation of group fields.

Pydantic schemas describe the accepted shape of group input; failures are
translated into the directory's own ValidationError.
"""

from typing import Any

import pydantic
from pydantic import BaseModel, ConfigDict, Field, field_validator

from groupkeeper.core.exceptions import ValidationError

NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500


class GroupCreate(BaseModel):
    """Schema for creating a group."""

    model_config = ConfigDict(strict=True)

    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)
    description: str = Field("", max_length=DESCRIPTION_MAX_LENGTH)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Group name must not be blank")
        return v


class GroupUpdate(BaseModel):
    """Schema for updating a group. Omitted fields are left unchanged."""

    model_config = ConfigDict(strict=True)

    name: str | None = Field(None, min_length=1, max_length=NAME_MAX_LENGTH)
    description: str | None = Field(None, max_length=DESCRIPTION_MAX_LENGTH)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            raise ValueError("Group name must not be blank")
        return v


def _translate(exc: pydantic.ValidationError) -> ValidationError:
    error = exc.errors()[0]
    field = str(error["loc"][0]) if error["loc"] else None
    return ValidationError(error["msg"], field=field, value=error.get("input"))


def validate_create(name: Any, description: Any) -> GroupCreate:
    """Validate input for a new group.

    Args:
        name: Requested group name.
        description: Requested description; None means empty.

    Returns:
        The validated schema.

    Raises:
        ValidationError: If a field is missing or malformed.
    """
    try:
        return GroupCreate(name=name, description="" if description is None else description)
    except pydantic.ValidationError as e:
        raise _translate(e) from e


def validate_update(name: Any = None, description: Any = None) -> GroupUpdate:
    """Validate the fields supplied to an update.

    Raises:
        ValidationError: If a supplied field is malformed.
    """
    try:
        return GroupUpdate(name=name, description=description)
    except pydantic.ValidationError as e:
        raise _translate(e) from e
