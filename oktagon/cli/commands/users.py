"""
User commands

Lifecycle operations on a single user and user listings.
"""

from typing import Optional

import typer

from oktagon.adapter.okta_client import GROUPS_READ, USERS_MANAGE, USERS_READ
from oktagon.adapter.services import OktaGroupService, OktaUserService
from oktagon.app.services.password import generate_password
from oktagon.app.use_cases import (
    ActivateUserUseCase,
    CreateUserUseCase,
    DeactivateUserUseCase,
    DeleteUserUseCase,
    ExpirePasswordUseCase,
    ListUsersUseCase,
)
from oktagon.cli.error import unwrap
from oktagon.cli.formatting import password_expiration_table, users_table
from oktagon.cli.runtime import console, envvar, okta_client, reports_errors, run

USER_ID_HELP = "ID or login of the user"


@reports_errors
def activate_user(
    ctx: typer.Context,
    user_id: str = typer.Argument(..., envvar=envvar("user-id"), help=USER_ID_HELP),
    dry_run: bool = typer.Option(
        False, "--dry-run", envvar=envvar("dry-run"), help="Only report what would happen"
    ),
    send_email: bool = typer.Option(
        False, "--send-email", envvar=envvar("send-email"), help="Send the activation email"
    ),
):
    """Activate a STAGED or DEPROVISIONED user."""

    async def activate():
        async with okta_client(ctx, [USERS_MANAGE]) as client:
            use_case = ActivateUserUseCase(OktaUserService(client))
            return await use_case.execute(user_id, dry_run=dry_run, send_email=send_email)

    user = unwrap(run(activate()))
    console.print(users_table([user]))


@reports_errors
def deactivate_user(
    ctx: typer.Context,
    user_id: str = typer.Argument(..., envvar=envvar("user-id"), help=USER_ID_HELP),
):
    """Deactivate (deprovision) a user."""

    async def deactivate():
        async with okta_client(ctx, [USERS_MANAGE]) as client:
            return await DeactivateUserUseCase(OktaUserService(client)).execute(user_id)

    user = unwrap(run(deactivate()))
    console.print(users_table([user]))


@reports_errors
def delete_user(
    ctx: typer.Context,
    user_id: str = typer.Argument(..., envvar=envvar("user-id"), help=USER_ID_HELP),
    force: bool = typer.Option(
        False, "--force", envvar=envvar("force"), help="Deactivate the user first if needed"
    ),
):
    """Delete a deprovisioned user."""

    async def delete():
        async with okta_client(ctx, [USERS_MANAGE]) as client:
            return await DeleteUserUseCase(OktaUserService(client)).execute(user_id, force=force)

    user = unwrap(run(delete()))
    console.print(f"Deleted user [{user.id}] [{user.email}].", markup=False)


@reports_errors
def expire_password(
    ctx: typer.Context,
    user_id: str = typer.Argument(..., envvar=envvar("user-id"), help=USER_ID_HELP),
    dry_run: bool = typer.Option(
        False, "--dry-run", envvar=envvar("dry-run"), help="Only report what would happen"
    ),
):
    """Expire the password of a user and print the temporary password."""

    async def expire():
        async with okta_client(ctx, [USERS_MANAGE]) as client:
            use_case = ExpirePasswordUseCase(OktaUserService(client))
            return await use_case.execute(user_id, dry_run=dry_run)

    expiration = unwrap(run(expire()))
    console.print(password_expiration_table(expiration))


@reports_errors
def create_user(
    ctx: typer.Context,
    email: str = typer.Argument(..., envvar=envvar("email"), help="Email, also used as login"),
    first_name: str = typer.Option("", "--first-name", envvar=envvar("first-name")),
    last_name: str = typer.Option("", "--last-name", envvar=envvar("last-name")),
):
    """Create an active user with a generated password."""

    async def create():
        async with okta_client(ctx, [USERS_MANAGE]) as client:
            use_case = CreateUserUseCase(OktaUserService(client))
            return await use_case.execute(email, first_name, last_name, generate_password())

    response = unwrap(run(create()))
    console.print(users_table([response.user]))
    console.print(f"Password: {response.password}", markup=False)


@reports_errors
def list_users(
    ctx: typer.Context,
    group_id: Optional[str] = typer.Option(
        None, "--group-id", envvar=envvar("group-id"), help="Only list members of this group"
    ),
):
    """List users, optionally restricted to the members of a group."""

    async def list_():
        async with okta_client(ctx, [USERS_READ, GROUPS_READ]) as client:
            use_case = ListUsersUseCase(OktaUserService(client), OktaGroupService(client))
            return await use_case.execute(group_id)

    users = unwrap(run(list_()))
    console.print(users_table(users))
