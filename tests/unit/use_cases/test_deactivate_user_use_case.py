from unittest.mock import AsyncMock

import pytest

from oktagon.app.use_cases.users.deactivate_user_use_case import DeactivateUserUseCase
from oktagon.libs.result import Return
from tests.fixtures.data_providers import SERVICE_ERROR, deactivated_user, user


@pytest.mark.asyncio
async def test_deactivate_user_not_found(mock_users):
    """Absent user cannot be deactivated"""
    mock_users.get_user = AsyncMock(return_value=Return.ok(None))

    result = await DeactivateUserUseCase(mock_users).execute("user_id")

    assert result.error.code == "USER_NOT_FOUND"
    assert result.error.message == "User [user_id] does not exist. Can not de-activate."
    mock_users.deactivate_user.assert_not_called()


@pytest.mark.asyncio
async def test_deactivate_already_deactivated_user(mock_users):
    """Deactivating a deprovisioned user twice returns the same snapshot, never calling the service"""
    # Arrange
    mock_users.get_user = AsyncMock(return_value=Return.ok(deactivated_user))
    use_case = DeactivateUserUseCase(mock_users)

    # Act
    first = await use_case.execute("user_id")
    second = await use_case.execute("user_id")

    # Assert
    assert first.is_ok()
    assert first.value == deactivated_user
    assert second == first
    mock_users.deactivate_user.assert_not_called()


@pytest.mark.asyncio
async def test_deactivate_active_user(mock_users):
    """Active user is deactivated and re-fetched"""
    # Arrange
    mock_users.get_user = AsyncMock(
        side_effect=[Return.ok(user), Return.ok(deactivated_user)]
    )
    mock_users.deactivate_user = AsyncMock(return_value=Return.ok(deactivated_user))

    # Act
    result = await DeactivateUserUseCase(mock_users).execute("user_id")

    # Assert
    assert result.is_ok()
    assert result.value.deactivated
    mock_users.deactivate_user.assert_awaited_once_with("user_id")


@pytest.mark.asyncio
async def test_deactivate_user_service_error(mock_users):
    mock_users.get_user = AsyncMock(return_value=Return.ok(user))

    result = await DeactivateUserUseCase(mock_users).execute("user_id")

    assert result.error == SERVICE_ERROR


@pytest.mark.asyncio
async def test_deactivate_user_missing_afterwards(mock_users):
    mock_users.get_user = AsyncMock(side_effect=[Return.ok(user), Return.ok(None)])
    mock_users.deactivate_user = AsyncMock(return_value=Return.ok(deactivated_user))

    result = await DeactivateUserUseCase(mock_users).execute("user_id")

    assert result.error.code == "INCONSISTENT_STATE"
    assert result.error.message == "User [user_id] could not be found after deactivation."
