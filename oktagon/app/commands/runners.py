"""
Command Runners

Two interchangeable strategies for consuming planned commands: the executor
performs them against the user service, the dry-run reporter only describes
what would happen.
"""

import logging
from abc import ABC, abstractmethod
from typing import List

from oktagon.domain.entities import PasswordExpiration, UserOperation
from oktagon.libs.result import Error, Result, Return

from .dtos import CommandOutcome, UserCommand

logger = logging.getLogger(__name__)


class CommandRunner(ABC):
    """Runs commands in order and stops at the first error"""

    async def run(self, commands: List[UserCommand]) -> Result[CommandOutcome]:
        """
        Run every command in order.

        Args:
            commands: Commands produced by the planner

        Returns:
            Result of the last command, or the first Error encountered
        """
        if not commands:
            return Return.err(Error("INVALID_ARGUMENT", "No commands to run."))

        result = None
        for command in commands:
            result = await self.run_one(command)
            if result.is_err():
                return result
        return result

    async def run_one(self, command: UserCommand) -> Result[CommandOutcome]:
        if command.operation == UserOperation.activate:
            return await self.activate(command)
        if command.operation == UserOperation.expire_password:
            return await self.expire_password(command)
        return Return.err(
            Error("INVALID_ARGUMENT", f"Unsupported operation [{command.operation.value}].")
        )

    @abstractmethod
    async def activate(self, command: UserCommand) -> Result[CommandOutcome]:
        pass

    @abstractmethod
    async def expire_password(self, command: UserCommand) -> Result[CommandOutcome]:
        pass


class CommandExecutor(CommandRunner):
    """Performs commands and verifies the resulting state"""

    async def activate(self, command: UserCommand) -> Result[CommandOutcome]:
        user = command.user
        activated = await command.service.activate_user(user.id, command.send_email)
        if activated.is_err():
            return activated

        # Post-condition: the user must still be there after activation
        refetched = await command.service.get_user(user.id)
        if refetched.is_err():
            return refetched
        if refetched.value is None:
            return Return.err(
                Error(
                    "INCONSISTENT_STATE",
                    f"User [{user.id}] could not be found after activation.",
                )
            )

        current = refetched.value
        logger.info(
            f"Activated [{current.id}] [{current.email}]. "
            f"User now has status [{current.status.value}]."
        )
        return Return.ok(current)

    async def expire_password(self, command: UserCommand) -> Result[CommandOutcome]:
        user = command.user
        result = await command.service.expire_password_and_get_temporary_password(user.id)
        return result.tap(
            lambda expiration: logger.info(
                f"Expired password for user [{expiration.user.id}] [{expiration.user.email}]. "
                f"Temporary password is [{expiration.temporary_password}]."
            )
        )


class DryRunReporter(CommandRunner):
    """Reports the projected effect of commands without calling the service"""

    async def activate(self, command: UserCommand) -> Result[CommandOutcome]:
        user = command.user
        email_note = (
            "An activation email would be sent."
            if command.send_email
            else "No activation email would be sent."
        )
        logger.info(
            f"Will attempt to activate user [{user.id}] [{user.email}] "
            f"with status [{user.status.value}]. {email_note}"
        )
        return Return.ok(user)

    async def expire_password(self, command: UserCommand) -> Result[CommandOutcome]:
        user = command.user
        logger.info(f"Will attempt to expire the password of the user [{user.id}] [{user.email}].")
        return Return.ok(PasswordExpiration(user=user, temporary_password=""))


def select_runner(dry_run: bool) -> CommandRunner:
    return DryRunReporter() if dry_run else CommandExecutor()
