"""
Deactivate User Use Case

Deactivates (deprovisions) a user.
"""

import logging

from oktagon.app.services import IUserService
from oktagon.app.validators import validate_user_exists
from oktagon.domain.entities import User
from oktagon.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)


class DeactivateUserUseCase:
    """
    Use case for deactivating a user.

    Business Rules:
    - User must exist
    - Idempotent: an already deprovisioned user is returned unchanged and
      the deactivate endpoint is not called
    - After deactivation the user is fetched again and returned
    """

    def __init__(self, users: IUserService):
        self.users = users

    async def execute(self, user_id: str) -> Result[User]:
        user_result = await validate_user_exists(self.users, user_id, "Can not de-activate.")
        if user_result.is_err():
            return user_result

        user = user_result.value
        if user.deactivated:
            logger.info(f"User [{user.id}] [{user.email}] is already deactivated.")
            return Return.ok(user)

        deactivated = await self.users.deactivate_user(user.id)
        if deactivated.is_err():
            return deactivated

        refetched = await self.users.get_user(user.id)
        if refetched.is_err():
            return refetched
        if refetched.value is None:
            return Return.err(
                Error(
                    "INCONSISTENT_STATE",
                    f"User [{user.id}] could not be found after deactivation.",
                )
            )

        logger.info(f"Deactivated [{user.id}] [{user.email}].")
        return Return.ok(refetched.value)
