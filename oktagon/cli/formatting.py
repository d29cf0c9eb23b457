"""
Report formatting

Rich tables for the command reports, JSON for machine consumption.
"""

import json
from typing import Any, Dict, Iterable, List, Sequence

from rich.table import Table
from rich.text import Text

from oktagon.domain.entities import App, Group, PasswordExpiration, User


def _table(headers: Sequence[str], rows: Iterable[Sequence[Any]]) -> Table:
    table = Table(*headers, box=None, header_style="bold green")
    for row in rows:
        table.add_row(*[Text("" if value is None else str(value)) for value in row])
    return table


def users_table(users: Iterable[User]) -> Table:
    return _table(
        ["ID", "Login", "Email", "Name", "Status"],
        ([user.id, user.login, user.email, user.name, user.status.value] for user in users),
    )


def password_expiration_table(expiration: PasswordExpiration) -> Table:
    user = expiration.user
    return _table(
        ["ID", "Email", "Status", "Temporary Password"],
        [[user.id, user.email, user.status.value, expiration.temporary_password]],
    )


def groups_table(groups: Iterable[Group]) -> Table:
    return _table(
        ["ID", "Name", "Type"],
        ([group.id, group.name, group.type] for group in groups),
    )


def apps_table(apps: Iterable[App]) -> Table:
    return _table(
        ["ID", "Name", "Label", "Status", "Last Updated", "Created"],
        (
            [app.id, app.name, app.label, app.status, app.last_updated, app.created]
            for app in apps
        ),
    )


def logs_table(events: Iterable[Dict[str, Any]]) -> Table:
    return _table(
        ["ID", "Published", "Severity", "Type", "Who", "Message"],
        (
            [
                event.get("uuid"),
                event.get("published"),
                event.get("severity"),
                event.get("eventType"),
                (event.get("actor") or {}).get("displayName"),
                event.get("displayMessage"),
            ]
            for event in events
        ),
    )


def logs_json(events: List[Dict[str, Any]]) -> str:
    return json.dumps(events, indent=2)
