import logging
from unittest.mock import AsyncMock

import pytest

from oktagon.app.commands import (
    CommandExecutor,
    DryRunReporter,
    UserCommand,
    plan_activation,
    plan_password_expiration,
    select_runner,
)
from oktagon.domain.entities import PasswordExpiration, UserOperation
from oktagon.libs.result import Return
from tests.fixtures.data_providers import SERVICE_ERROR, staged_user, user


def test_planner_produces_one_command(mock_users):
    activation = plan_activation(mock_users, staged_user, send_email=True)
    expiration = plan_password_expiration(mock_users, user)

    assert activation == [
        UserCommand(
            operation=UserOperation.activate,
            user=staged_user,
            service=mock_users,
            send_email=True,
        )
    ]
    assert [command.operation for command in expiration] == [UserOperation.expire_password]


def test_select_runner():
    assert isinstance(select_runner(True), DryRunReporter)
    assert isinstance(select_runner(False), CommandExecutor)


@pytest.mark.asyncio
async def test_run_without_commands_is_an_error():
    result = await CommandExecutor().run([])

    assert result.error.code == "INVALID_ARGUMENT"


@pytest.mark.asyncio
async def test_executor_stops_at_first_error(mock_users):
    # Arrange
    commands = plan_activation(mock_users, staged_user) + plan_password_expiration(
        mock_users, staged_user
    )

    # Act
    result = await CommandExecutor().run(commands)

    # Assert
    assert result.error == SERVICE_ERROR
    mock_users.expire_password_and_get_temporary_password.assert_not_called()


@pytest.mark.asyncio
async def test_executor_logs_temporary_password(mock_users, caplog):
    expiration = PasswordExpiration(user=user, temporary_password="tmp-secret")
    mock_users.expire_password_and_get_temporary_password = AsyncMock(
        return_value=Return.ok(expiration)
    )

    with caplog.at_level(logging.INFO):
        result = await CommandExecutor().run(plan_password_expiration(mock_users, user))

    assert result.value == expiration
    assert (
        "Expired password for user [user_id] [test@localhost]. "
        "Temporary password is [tmp-secret]."
    ) in caplog.text


@pytest.mark.asyncio
async def test_dry_run_reports_without_calling_service(mock_users, caplog):
    """Dry run never touches the service"""
    with caplog.at_level(logging.INFO):
        activated = await DryRunReporter().run(plan_activation(mock_users, staged_user))
        expired = await DryRunReporter().run(plan_password_expiration(mock_users, user))

    assert activated.value == staged_user
    assert expired.value == PasswordExpiration(user=user, temporary_password="")
    assert (
        "Will attempt to activate user [user_id] [test@localhost] with status [STAGED]. "
        "No activation email would be sent."
    ) in caplog.text
    mock_users.activate_user.assert_not_called()
    mock_users.get_user.assert_not_called()
    mock_users.expire_password_and_get_temporary_password.assert_not_called()
