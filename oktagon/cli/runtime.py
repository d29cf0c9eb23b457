"""
Command runtime

Shared plumbing for command functions: environment variable names, the
Okta client for the invocation and error reporting.
"""

import asyncio
import functools
from typing import Any, Callable, Coroutine, Sequence, TypeVar

import typer
from rich.console import Console

from oktagon import depends
from oktagon.adapter.okta_client import OktaClient
from oktagon.domain.entities import OktaConfiguration

from .error import CommandError, handle_command_error

ENV_PREFIX = "OKTAGON"

console = Console(highlight=False, soft_wrap=True)

T = TypeVar("T")


def envvar(option: str) -> str:
    """OKTAGON_<OPTION> for an option name such as "dry-run" """
    return f"{ENV_PREFIX}_{option.replace('-', '_').upper()}"


def okta_client(ctx: typer.Context, scopes: Sequence[str]) -> OktaClient:
    configuration: OktaConfiguration = ctx.obj
    return depends.get_okta_client(configuration, scopes)


def run(coroutine: Coroutine[Any, Any, T]) -> T:
    return asyncio.run(coroutine)


def reports_errors(command: Callable[..., Any]) -> Callable[..., Any]:
    """Turn a CommandError raised by a command into a message on stderr and exit code 1"""

    @functools.wraps(command)
    def wrapper(*args, **kwargs):
        try:
            return command(*args, **kwargs)
        except CommandError as exc:
            handle_command_error(exc)

    return wrapper
