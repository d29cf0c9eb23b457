from unittest.mock import AsyncMock

import pytest

from oktagon.app.use_cases.users.delete_user_use_case import DeleteUserUseCase
from oktagon.libs.result import Return
from tests.fixtures.data_providers import SERVICE_ERROR, deactivated_user, user


@pytest.mark.asyncio
async def test_delete_deprovisioned_user(mock_users):
    """Deprovisioned user is deleted once without force"""
    # Arrange
    mock_users.get_user = AsyncMock(return_value=Return.ok(deactivated_user))
    mock_users.delete_user = AsyncMock(return_value=Return.ok(deactivated_user))
    use_case = DeleteUserUseCase(mock_users)

    # Act
    result = await use_case.execute("user_id")

    # Assert
    assert result.is_ok()
    assert result.value == deactivated_user
    mock_users.delete_user.assert_awaited_once_with("user_id")
    mock_users.deactivate_user.assert_not_called()


@pytest.mark.asyncio
async def test_delete_active_user_without_force(mock_users):
    """Active user must be deprovisioned first; delete is never called"""
    # Arrange
    mock_users.get_user = AsyncMock(return_value=Return.ok(user))
    use_case = DeleteUserUseCase(mock_users)

    # Act
    result = await use_case.execute("user_id")

    # Assert
    assert result.error.code == "USER_NOT_DEPROVISIONED"
    assert result.error.message == (
        "User [user_id] has not been deprovisioned. Deprovision before deleting."
    )
    mock_users.delete_user.assert_not_called()


@pytest.mark.asyncio
async def test_delete_active_user_with_force(mock_users):
    """Force deactivates first, then deletes, returning the pre-delete snapshot"""
    # Arrange
    mock_users.get_user = AsyncMock(return_value=Return.ok(user))
    mock_users.deactivate_user = AsyncMock(return_value=Return.ok(deactivated_user))
    mock_users.delete_user = AsyncMock(return_value=Return.ok(deactivated_user))

    # Act
    result = await DeleteUserUseCase(mock_users).execute("user_id", force=True)

    # Assert
    assert result.is_ok()
    assert result.value == user
    mock_users.deactivate_user.assert_awaited_once_with("user_id")
    mock_users.delete_user.assert_awaited_once_with("user_id")


@pytest.mark.asyncio
async def test_delete_with_force_stops_when_deactivation_fails(mock_users):
    """A failed deactivation aborts before delete"""
    mock_users.get_user = AsyncMock(return_value=Return.ok(user))

    result = await DeleteUserUseCase(mock_users).execute("user_id", force=True)

    assert result.error == SERVICE_ERROR
    mock_users.delete_user.assert_not_called()


@pytest.mark.asyncio
async def test_delete_user_not_found(mock_users):
    mock_users.get_user = AsyncMock(return_value=Return.ok(None))

    result = await DeleteUserUseCase(mock_users).execute("user_id")

    assert result.error.message == "User [user_id] does not exist. Can not delete."
    mock_users.delete_user.assert_not_called()
