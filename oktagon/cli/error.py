import logging
from typing import TypeVar

import typer
from rich.console import Console
from rich.markup import escape

from oktagon.libs.result import Error, Result

logger = logging.getLogger(__name__)

err_console = Console(stderr=True, highlight=False, soft_wrap=True)

T = TypeVar("T")


class CommandError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


def unwrap(result: Result[T]) -> T:
    """Success value of result, or CommandError carrying its Error"""
    if result.is_err():
        raise CommandError(result.error)
    return result.value


def handle_command_error(exc: CommandError):
    error = exc.base_error
    logger.warning(f"Command error: {error.code}")
    err_console.print(f"[bold red]ERROR[/bold red] {escape(error.message)}")
    if isinstance(error.cause, list):
        for issue in error.cause:
            err_console.print(f"  - {escape(str(issue))}")
    elif error.cause is not None:
        err_console.print(f"  Caused by: {escape(str(error.cause))}")
    raise typer.Exit(code=1)
