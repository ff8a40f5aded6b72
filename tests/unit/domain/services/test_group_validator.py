"""Unit tests for group field validation."""

import pydantic
import pytest

from groupkeeper.core.exceptions import ValidationError
from groupkeeper.domain.services.group_validator import (
    DESCRIPTION_MAX_LENGTH,
    NAME_MAX_LENGTH,
    validate_create,
    validate_update,
)


def test_validate_create_accepts_valid_input():
    data = validate_create("Admins", "Top-level admins")

    assert data.name == "Admins"
    assert data.description == "Top-level admins"


def test_validate_create_none_description_becomes_empty():
    assert validate_create("Admins", None).description == ""


def test_validate_create_limits():
    assert validate_create("n" * NAME_MAX_LENGTH, "d" * DESCRIPTION_MAX_LENGTH)

    with pytest.raises(ValidationError) as exc_info:
        validate_create("n" * (NAME_MAX_LENGTH + 1), "")
    assert exc_info.value.field == "name"


@pytest.mark.parametrize("name", ["", "  \t", None, 7, ["Admins"]])
def test_validate_create_rejects_bad_names(name):
    with pytest.raises(ValidationError) as exc_info:
        validate_create(name, "")

    assert exc_info.value.field == "name"
    assert exc_info.value.value == name


def test_validate_create_rejects_non_string_description():
    with pytest.raises(ValidationError) as exc_info:
        validate_create("Admins", 12)

    assert exc_info.value.field == "description"


def test_validate_update_allows_omitted_fields():
    data = validate_update()

    assert data.name is None
    assert data.description is None


def test_validate_update_rejects_blank_name():
    with pytest.raises(ValidationError):
        validate_update(name="   ")


def test_validation_error_chains_pydantic_error():
    with pytest.raises(ValidationError) as exc_info:
        validate_update(description="d" * (DESCRIPTION_MAX_LENGTH + 1))

    assert isinstance(exc_info.value.__cause__, pydantic.ValidationError)
