"""
Delete User Use Case

Deletes a deprovisioned user, optionally deprovisioning it first.
"""

import logging

from oktagon.app.services import IUserService
from oktagon.app.validators import validate_user_exists
from oktagon.domain.entities import User
from oktagon.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """
    Use case for deleting a user.

    Business Rules:
    - User must exist
    - Only DEPROVISIONED users can be deleted
    - Without force a non-deprovisioned user is refused, nothing is called
    - With force the user is deactivated first; a failed deactivation
      aborts before delete
    - Returns the snapshot taken before deletion
    """

    def __init__(self, users: IUserService):
        self.users = users

    async def execute(self, user_id: str, force: bool = False) -> Result[User]:
        """
        Execute delete user use case.

        Args:
            user_id: ID or login of the user to delete
            force: Deactivate the user first when it is not deprovisioned

        Returns:
            Result with the pre-delete user snapshot, or Error
        """
        user_result = await validate_user_exists(self.users, user_id, "Can not delete.")
        if user_result.is_err():
            return user_result

        user = user_result.value
        if not user.deactivated:
            if not force:
                return Return.err(
                    Error(
                        "USER_NOT_DEPROVISIONED",
                        f"User [{user_id}] has not been deprovisioned. "
                        "Deprovision before deleting.",
                    )
                )

            deactivated = await self.users.deactivate_user(user.id)
            if deactivated.is_err():
                return deactivated
            logger.info(f"Deactivated [{user.id}] [{user.email}] prior to deletion.")

        deleted = await self.users.delete_user(user.id)
        if deleted.is_err():
            return deleted

        logger.info(f"Deleted [{user.id}] [{user.email}].")
        return Return.ok(user)
