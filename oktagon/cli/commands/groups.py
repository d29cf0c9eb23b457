"""
Group commands
"""

from typing import Optional

import typer

from oktagon.adapter.okta_client import GROUPS_MANAGE, GROUPS_READ, USERS_READ
from oktagon.adapter.services import OktaGroupService, OktaUserService
from oktagon.app.use_cases import (
    AddUserToGroupUseCase,
    ListGroupsUseCase,
    RemoveUserFromGroupUseCase,
)
from oktagon.cli.error import unwrap
from oktagon.cli.formatting import groups_table
from oktagon.cli.runtime import console, envvar, okta_client, reports_errors, run

MEMBERSHIP_SCOPES = [USERS_READ, GROUPS_MANAGE]


@reports_errors
def add_user_to_group(
    ctx: typer.Context,
    user_id: str = typer.Argument(..., envvar=envvar("user-id"), help="ID or login of the user"),
    group_id: str = typer.Argument(..., envvar=envvar("group-id"), help="ID of the group"),
):
    """Add a user to a group."""

    async def add():
        async with okta_client(ctx, MEMBERSHIP_SCOPES) as client:
            use_case = AddUserToGroupUseCase(OktaUserService(client), OktaGroupService(client))
            return await use_case.execute(user_id, group_id)

    console.print(unwrap(run(add())), markup=False)


@reports_errors
def remove_user_from_group(
    ctx: typer.Context,
    user_id: str = typer.Argument(..., envvar=envvar("user-id"), help="ID or login of the user"),
    group_id: str = typer.Argument(..., envvar=envvar("group-id"), help="ID of the group"),
):
    """Remove a user from a group."""

    async def remove():
        async with okta_client(ctx, MEMBERSHIP_SCOPES) as client:
            use_case = RemoveUserFromGroupUseCase(OktaUserService(client), OktaGroupService(client))
            return await use_case.execute(user_id, group_id)

    console.print(unwrap(run(remove())), markup=False)


@reports_errors
def list_groups(
    ctx: typer.Context,
    user_id: Optional[str] = typer.Option(
        None, "--user-id", envvar=envvar("user-id"), help="Only list groups of this user"
    ),
):
    """List groups, optionally only those a user belongs to."""

    async def list_():
        async with okta_client(ctx, [GROUPS_READ]) as client:
            return await ListGroupsUseCase(OktaGroupService(client)).execute(user_id)

    console.print(groups_table(unwrap(run(list_()))))
