"""
Get Logs Use Case

Retrieves system log events, resolving relative time windows.
"""

import re
from datetime import UTC, datetime, timedelta
from typing import Any, Callable, Dict, List, Optional

from oktagon.app.services import IOrganisationService
from oktagon.libs.result import Error, Result, Return

WINDOW_PATTERN = re.compile(r"^(\d+)([smhdw])$")
WINDOW_UNITS = {
    "s": "seconds",
    "m": "minutes",
    "h": "hours",
    "d": "days",
    "w": "weeks",
}


def parse_window(window: str) -> Result[timedelta]:
    """Parse a relative window such as 15m, 2h, 1d or 1w"""
    match = WINDOW_PATTERN.match(window.strip())
    if match is None or int(match.group(1)) == 0:
        return Return.err(
            Error(
                "INVALID_ARGUMENT",
                f"Invalid time window [{window}]. Use a positive number followed by "
                "one of s, m, h, d or w (e.g. 15m).",
            )
        )
    amount, unit = match.groups()
    return Return.ok(timedelta(**{WINDOW_UNITS[unit]: int(amount)}))


class GetLogsUseCase:
    """
    Use case for retrieving system log events.

    Business Rules:
    - limit must be positive
    - within is relative to now and cannot be combined with since
    - since must not be after until
    - Arguments are rejected before any network call
    """

    def __init__(
        self,
        organisation: IOrganisationService,
        clock: Callable[[], datetime] = lambda: datetime.now(UTC),
    ):
        self.organisation = organisation
        self.clock = clock

    async def execute(
        self,
        limit: int,
        query: Optional[str] = None,
        filter: Optional[str] = None,
        since: Optional[datetime] = None,
        until: Optional[datetime] = None,
        within: Optional[str] = None,
    ) -> Result[List[Dict[str, Any]]]:
        """
        Execute get logs use case.

        Args:
            limit: Maximum number of events
            query: Keyword query (e.g. OIDC)
            filter: Okta filter expression (e.g. eventType eq "user.session.start")
            since: Earliest event time
            until: Latest event time
            within: Relative window ending now, alternative to since

        Returns:
            Result with raw log events, or Error
        """
        if limit < 1:
            return Return.err(
                Error("INVALID_ARGUMENT", f"Limit must be a positive number, got [{limit}].")
            )

        if within is not None:
            if since is not None:
                return Return.err(
                    Error("INVALID_ARGUMENT", "Options --since and --within cannot be used together.")
                )
            window = parse_window(within)
            if window.is_err():
                return window
            since = self.clock() - window.value

        if since is not None and until is not None and since > until:
            return Return.err(
                Error(
                    "INVALID_ARGUMENT",
                    f"Start date [{since.isoformat()}] is after end date [{until.isoformat()}].",
                )
            )

        return await self.organisation.retrieve_logs(limit, query, filter, since, until)
