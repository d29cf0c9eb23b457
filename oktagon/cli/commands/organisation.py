"""
Organisation commands

Connectivity check, applications and the system log.
"""

from datetime import UTC, datetime
from typing import Optional

import typer

from oktagon.adapter.okta_client import APPS_READ, LOGS_READ, USERS_READ
from oktagon.adapter.services import OktaAppService, OktaOrganisationService
from oktagon.app.use_cases import GetLogsUseCase, ListAppsUseCase, PingUseCase
from oktagon.config import ApplicationConfig
from oktagon.domain.entities import OutputFormat
from oktagon.cli.error import unwrap
from oktagon.cli.formatting import apps_table, logs_json, logs_table
from oktagon.cli.runtime import console, envvar, okta_client, reports_errors, run


def _aware(moment: Optional[datetime]) -> Optional[datetime]:
    """Dates given without an offset are taken as UTC"""
    if moment is not None and moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment


@reports_errors
def ping(ctx: typer.Context):
    """Check that the organisation answers and the credentials are accepted."""

    async def ping_():
        async with okta_client(ctx, [USERS_READ]) as client:
            return await PingUseCase(OktaOrganisationService(client)).execute()

    unwrap(run(ping_()))
    console.print("Okta server is up and running. Credentials are valid.", markup=False)


@reports_errors
def list_apps(
    ctx: typer.Context,
    user_id: Optional[str] = typer.Option(
        None, "--user-id", envvar=envvar("user-id"), help="Only list apps assigned to this user"
    ),
):
    """List applications, optionally only those assigned to a user."""

    async def list_():
        async with okta_client(ctx, [APPS_READ]) as client:
            return await ListAppsUseCase(OktaAppService(client)).execute(user_id)

    console.print(apps_table(unwrap(run(list_()))))


@reports_errors
def logs(
    ctx: typer.Context,
    output_format: OutputFormat = typer.Option(
        OutputFormat.table, "--output-format", envvar=envvar("output-format")
    ),
    limit: int = typer.Option(
        ApplicationConfig.LOG_LIMIT, "--limit", envvar=envvar("limit"), help="Maximum number of events"
    ),
    query: Optional[str] = typer.Option(
        None, "--query", envvar=envvar("query"), help="Keyword search (e.g. OIDC)"
    ),
    filter: Optional[str] = typer.Option(
        None,
        "--filter",
        envvar=envvar("filter"),
        help='Filter expression (e.g. eventType eq "user.session.start")',
    ),
    since: Optional[datetime] = typer.Option(
        None, "--since", envvar=envvar("since"), help="Earliest event time (UTC if no offset)"
    ),
    until: Optional[datetime] = typer.Option(
        None, "--until", envvar=envvar("until"), help="Latest event time (UTC if no offset)"
    ),
    within: Optional[str] = typer.Option(
        None, "--within", envvar=envvar("within"), help="Relative window ending now (e.g. 15m, 2h, 1d)"
    ),
):
    """Print system log events."""

    async def logs_():
        async with okta_client(ctx, [LOGS_READ]) as client:
            use_case = GetLogsUseCase(OktaOrganisationService(client))
            return await use_case.execute(
                limit,
                query=query,
                filter=filter,
                since=_aware(since),
                until=_aware(until),
                within=within,
            )

    events = unwrap(run(logs_()))
    if output_format == OutputFormat.json:
        typer.echo(logs_json(events))
    else:
        console.print(logs_table(events))
