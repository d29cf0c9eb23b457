"""
Expire Password Use Case

Expires a user's password and issues a temporary one.
"""

import logging

from oktagon.app.commands import plan_password_expiration, select_runner
from oktagon.app.services import IUserService
from oktagon.app.validators import (
    validate_user_exists,
    validate_user_status_for_password_expiration,
)
from oktagon.domain.entities import PasswordExpiration
from oktagon.libs.result import Result

logger = logging.getLogger(__name__)


class ExpirePasswordUseCase:
    """
    Use case for expiring a password and getting a temporary password.

    Business Rules:
    - User must exist
    - SUSPENDED and DEPROVISIONED users are rejected
    - Dry run returns an empty temporary password and calls nothing
    """

    def __init__(self, users: IUserService):
        self.users = users

    async def execute(
        self, user_id: str, dry_run: bool = False
    ) -> Result[PasswordExpiration]:
        """
        Execute expire password use case.

        Args:
            user_id: ID or login of the user
            dry_run: Only report what would happen

        Returns:
            Result with the user and temporary password, or Error
        """
        user_result = await validate_user_exists(
            self.users, user_id, "Can not expire password."
        )
        if user_result.is_err():
            return user_result

        user_result.tap(
            lambda user: logger.info(
                f"Prior to password expiration, the user has status: [{user.status.value}]."
            )
        )

        expirable = validate_user_status_for_password_expiration(user_result.value)
        if expirable.is_err():
            return expirable

        commands = plan_password_expiration(self.users, expirable.value)
        return await select_runner(dry_run).run(commands)
