"""Unit tests for GroupRepository."""

from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from groupkeeper.infrastructure.persistence.models import (
    GroupModel,
    GroupsPermissionsModel,
    UsersGroupsModel,
)
from groupkeeper.infrastructure.persistence.repositories import (
    GroupRepository,
    PermissionRepository,
    UserRepository,
)


@pytest.fixture
def mock_session():
    """Create a mock database session."""
    return AsyncMock(spec=AsyncSession)


@pytest_asyncio.fixture
async def group_repo(seeded_session: AsyncSession) -> GroupRepository:
    return GroupRepository(seeded_session)


@pytest_asyncio.fixture
async def admins(group_repo: GroupRepository) -> GroupModel:
    return await group_repo.create(GroupModel(name="Admins", description="Top-level admins"))


@pytest.mark.asyncio
async def test_create_group_flushes(mock_session):
    """Test creating a group against a mocked session."""
    repo = GroupRepository(mock_session)
    group = GroupModel(name="Admins", description="")

    result = await repo.create(group)

    assert result == group
    mock_session.add.assert_called_once_with(group)
    mock_session.flush.assert_awaited_once()


@pytest.mark.asyncio
async def test_add_user_creates_junction_row(mock_session):
    repo = GroupRepository(mock_session)

    await repo.add_user(1, 9)

    added = mock_session.add.call_args[0][0]
    assert isinstance(added, UsersGroupsModel)
    assert (added.group_id, added.user_id) == (1, 9)
    mock_session.flush.assert_awaited_once()


@pytest.mark.asyncio
async def test_add_permission_creates_junction_row(mock_session):
    repo = GroupRepository(mock_session)

    await repo.add_permission(1, 5)

    added = mock_session.add.call_args[0][0]
    assert isinstance(added, GroupsPermissionsModel)
    assert (added.group_id, added.permission_id) == (1, 5)


@pytest.mark.asyncio
async def test_get_by_id_and_name(group_repo, admins):
    assert (await group_repo.get_by_id(admins.id)).name == "Admins"
    assert (await group_repo.get_by_name("Admins")).id == admins.id
    assert await group_repo.get_by_id(999) is None
    assert await group_repo.get_by_name("Editors") is None


@pytest.mark.asyncio
async def test_list_all_ordered_by_id(group_repo, admins):
    editors = await group_repo.create(GroupModel(name="Editors", description=""))

    groups = await group_repo.list_all()

    assert [g.id for g in groups] == [admins.id, editors.id]


@pytest.mark.asyncio
async def test_duplicate_name_violates_unique_constraint(group_repo, admins):
    with pytest.raises(IntegrityError):
        await group_repo.create(GroupModel(name="Admins", description=""))


@pytest.mark.asyncio
async def test_permission_links(group_repo, admins):
    await group_repo.add_permission(admins.id, 6)
    await group_repo.add_permission(admins.id, 5)

    assert await group_repo.has_permission(admins.id, 5)
    assert await group_repo.get_permission_ids(admins.id) == [5, 6]

    assert await group_repo.remove_permission(admins.id, 5) is True
    assert await group_repo.remove_permission(admins.id, 5) is False
    assert not await group_repo.has_permission(admins.id, 5)
    assert await group_repo.get_permission_ids(admins.id) == [6]


@pytest.mark.asyncio
async def test_user_links(group_repo, admins):
    await group_repo.add_user(admins.id, 9)

    assert await group_repo.has_user(admins.id, 9)
    assert not await group_repo.has_user(admins.id, 10)
    assert await group_repo.get_user_ids(admins.id) == [9]

    assert await group_repo.remove_user(admins.id, 9) is True
    assert await group_repo.remove_user(admins.id, 9) is False
    assert await group_repo.get_user_ids(admins.id) == []


@pytest.mark.asyncio
async def test_duplicate_link_violates_primary_key(group_repo, admins, seeded_session):
    await group_repo.add_user(admins.id, 9)
    # Forget the first row so the conflict is detected by the database
    seeded_session.expunge_all()

    with pytest.raises(IntegrityError):
        await group_repo.add_user(admins.id, 9)


@pytest.mark.asyncio
async def test_link_to_missing_user_violates_foreign_key(group_repo, admins):
    with pytest.raises(IntegrityError):
        await group_repo.add_user(admins.id, 404)


@pytest.mark.asyncio
async def test_delete_by_id(group_repo, admins):
    await group_repo.add_permission(admins.id, 5)
    await group_repo.add_user(admins.id, 9)
    group_id = admins.id

    assert await group_repo.delete_by_id(group_id) is True
    assert await group_repo.get_by_id(group_id) is None
    assert await group_repo.get_permission_ids(group_id) == []
    assert await group_repo.get_user_ids(group_id) == []
    assert await group_repo.delete_by_id(group_id) is False


@pytest.mark.asyncio
async def test_update_and_refresh(group_repo, admins):
    admins.description = "Changed"

    await group_repo.update(admins)
    await group_repo.refresh(admins)

    assert admins.description == "Changed"
    assert admins.updated_at is not None


@pytest.mark.asyncio
async def test_permission_and_user_lookups(seeded_session):
    permissions = PermissionRepository(seeded_session)
    users = UserRepository(seeded_session)

    assert (await permissions.get_by_id(5)).name == "records.read"
    assert await permissions.get_by_id(404) is None
    assert (await users.get_by_id(9)).email == "alice@example.com"
    assert await users.get_by_id(404) is None


@pytest.mark.asyncio
async def test_lookup_with_mocked_session(mock_session):
    mock_result = MagicMock()
    mock_result.scalar_one_or_none.return_value = None
    mock_session.execute.return_value = mock_result

    assert await PermissionRepository(mock_session).get_by_id(5) is None
    mock_session.execute.assert_awaited_once()
