from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest

from oktagon.app.services import IOrganisationService
from oktagon.app.use_cases.organisation import GetLogsUseCase, PingUseCase, parse_window
from oktagon.libs.result import Error, Return

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def mock_organisation():
    organisation = MagicMock(spec=IOrganisationService)
    organisation.ping = AsyncMock(return_value=Return.ok("Okta server is up and running."))
    organisation.validate_credentials = AsyncMock(return_value=Return.ok(True))
    organisation.retrieve_logs = AsyncMock(return_value=Return.ok([]))
    return organisation


@pytest.mark.asyncio
async def test_ping(mock_organisation):
    result = await PingUseCase(mock_organisation).execute()

    assert result.value is True
    mock_organisation.validate_credentials.assert_awaited_once()


@pytest.mark.asyncio
async def test_ping_server_error_skips_credentials(mock_organisation):
    """Credentials are only checked once the server answered"""
    unavailable = Error("SERVER_UNAVAILABLE", "Server error. Please wait and try again later.")
    mock_organisation.ping = AsyncMock(return_value=Return.err(unavailable))

    result = await PingUseCase(mock_organisation).execute()

    assert result.error == unavailable
    mock_organisation.validate_credentials.assert_not_called()


@pytest.mark.asyncio
async def test_ping_invalid_credentials(mock_organisation):
    invalid = Error("INVALID_CREDENTIALS", "Client error. Please check your private key.")
    mock_organisation.validate_credentials = AsyncMock(return_value=Return.err(invalid))

    result = await PingUseCase(mock_organisation).execute()

    assert result.error.code == "INVALID_CREDENTIALS"


@pytest.mark.parametrize(
    "window, expected",
    [
        ("30s", timedelta(seconds=30)),
        ("15m", timedelta(minutes=15)),
        ("2h", timedelta(hours=2)),
        ("1d", timedelta(days=1)),
        ("1w", timedelta(weeks=1)),
    ],
)
def test_parse_window(window, expected):
    assert parse_window(window).value == expected


@pytest.mark.parametrize("window", ["", "0m", "15", "m", "15y", "-1h"])
def test_parse_window_rejects(window):
    result = parse_window(window)

    assert result.error.code == "INVALID_ARGUMENT"
    assert f"Invalid time window [{window}]" in result.error.message


@pytest.mark.asyncio
async def test_get_logs_passes_filters(mock_organisation):
    # Arrange
    since = NOW - timedelta(days=1)
    use_case = GetLogsUseCase(mock_organisation, clock=lambda: NOW)

    # Act
    result = await use_case.execute(
        5, query="OIDC", filter='eventType eq "user.session.start"', since=since, until=NOW
    )

    # Assert
    assert result.is_ok()
    mock_organisation.retrieve_logs.assert_awaited_once_with(
        5, "OIDC", 'eventType eq "user.session.start"', since, NOW
    )


@pytest.mark.asyncio
async def test_get_logs_within_is_relative_to_now(mock_organisation):
    use_case = GetLogsUseCase(mock_organisation, clock=lambda: NOW)

    await use_case.execute(10, within="15m")

    mock_organisation.retrieve_logs.assert_awaited_once_with(
        10, None, None, NOW - timedelta(minutes=15), None
    )


@pytest.mark.asyncio
async def test_get_logs_rejects_since_with_within(mock_organisation):
    result = await GetLogsUseCase(mock_organisation).execute(10, since=NOW, within="1h")

    assert result.error.message == "Options --since and --within cannot be used together."
    mock_organisation.retrieve_logs.assert_not_called()


@pytest.mark.asyncio
async def test_get_logs_rejects_inverted_range(mock_organisation):
    result = await GetLogsUseCase(mock_organisation).execute(
        10, since=NOW, until=NOW - timedelta(hours=1)
    )

    assert result.error.code == "INVALID_ARGUMENT"
    assert result.error.message.startswith("Start date [2024-05-01T12:00:00+00:00] is after")
    mock_organisation.retrieve_logs.assert_not_called()


@pytest.mark.asyncio
async def test_get_logs_rejects_non_positive_limit(mock_organisation):
    result = await GetLogsUseCase(mock_organisation).execute(0)

    assert result.error.message == "Limit must be a positive number, got [0]."
    mock_organisation.retrieve_logs.assert_not_called()
