"""
Activate User Use Case

Activates a staged or deprovisioned user.
"""

from oktagon.app.commands import plan_activation, select_runner
from oktagon.app.services import IUserService
from oktagon.app.validators import (
    validate_user_exists,
    validate_user_status_for_activation,
)
from oktagon.domain.entities import User
from oktagon.libs.result import Result


class ActivateUserUseCase:
    """
    Use case for activating a user.

    Business Rules:
    - User must exist
    - User status must be STAGED or DEPROVISIONED
    - Other statuses are rejected with a remediation hint where one exists
    - Dry run validates everything but never calls the activation endpoint
    - After activation the user is fetched again to report its new status
    """

    def __init__(self, users: IUserService):
        self.users = users

    async def execute(
        self, user_id: str, dry_run: bool = False, send_email: bool = False
    ) -> Result[User]:
        """
        Execute activate user use case.

        Args:
            user_id: ID or login of the user to activate
            dry_run: Only report what would happen
            send_email: Have Okta send the activation email

        Returns:
            Result with the (re-fetched, or unmodified in dry run) user, or Error
        """
        # 1. User must exist
        user_result = await validate_user_exists(self.users, user_id, "Cannot activate.")
        if user_result.is_err():
            return user_result

        # 2. Status must permit activation
        activatable = validate_user_status_for_activation(user_result.value)
        if activatable.is_err():
            return activatable

        # 3. Plan and run (executor or dry-run reporter)
        commands = plan_activation(self.users, activatable.value, send_email)
        return await select_runner(dry_run).run(commands)
