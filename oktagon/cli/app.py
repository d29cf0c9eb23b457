"""
Oktagon CLI

Typer application: global connection options, logging setup and command
registration.
"""

import logging
import sys

import typer

from oktagon.config import ApplicationConfig
from oktagon.domain.entities import OktaConfiguration, parse_organisation_url

from . import commands
from .error import unwrap
from .runtime import envvar, reports_errors

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

app = typer.Typer(
    name="oktagon",
    help="Administer users, groups and applications of an Okta organisation.",
    no_args_is_help=True,
    add_completion=False,
)


def setup_logging(level: str):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


@app.callback()
@reports_errors
def main_callback(
    ctx: typer.Context,
    client_id: str = typer.Option(..., "--client-id", envvar=envvar("client-id"), help="Okta client ID"),
    private_key: str = typer.Option(
        ...,
        "--private-key",
        envvar=envvar("private-key"),
        help="Private key of the client, as JWK JSON or PEM",
        show_default=False,
    ),
    organisation_url: str = typer.Option(
        ...,
        "--organisation-url",
        "--org-url",
        envvar=envvar("organisation-url"),
        help="URL of the organisation (e.g. https://acme.okta.com)",
    ),
    log_level: str = typer.Option(
        ApplicationConfig.LOG_LEVEL, "--log-level", envvar=envvar("log-level")
    ),
):
    setup_logging(log_level)
    url = unwrap(parse_organisation_url(organisation_url))
    ctx.obj = OktaConfiguration(
        client_id=client_id, private_key=private_key, organisation_url=url
    )


# Users
app.command("activate-user")(commands.activate_user)
app.command("deactivate-user")(commands.deactivate_user)
app.command("delete-user")(commands.delete_user)
app.command("expire-password-and-get-temporary-password")(commands.expire_password)
app.command("create-user")(commands.create_user)
app.command("list-users")(commands.list_users)

# Groups
app.command("add-user-to-group")(commands.add_user_to_group)
app.command("remove-user-from-group")(commands.remove_user_from_group)
app.command("list-groups")(commands.list_groups)

# Organisation
app.command("list-apps")(commands.list_apps)
app.command("logs")(commands.logs)
app.command("ping")(commands.ping)


def main():
    app()
