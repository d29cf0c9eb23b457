"""
Add User To Group Use Case

Adds an existing user to an existing group.
"""

import asyncio
import logging

from oktagon.app.services import IGroupService, IUserService
from oktagon.app.validators import validate_membership_targets
from oktagon.libs.result import Result

logger = logging.getLogger(__name__)


class AddUserToGroupUseCase:
    """
    Use case for adding a user to a group.

    Business Rules:
    - User and group are looked up concurrently; neither lookup is skipped
      because the other failed
    - A failed user lookup is reported before a failed group lookup
    - Missing resources are reported together, group first
    - Membership is not checked beforehand, so adding an existing member
      still succeeds
    """

    def __init__(self, users: IUserService, groups: IGroupService):
        self.users = users
        self.groups = groups

    async def execute(self, user_id: str, group_id: str) -> Result[str]:
        """
        Execute add user to group use case.

        Args:
            user_id: ID or login of the user
            group_id: ID of the group

        Returns:
            Result with the confirmation from the group service, or Error
        """
        user_result, group_result = await asyncio.gather(
            self.users.get_user(user_id), self.groups.get_group(group_id)
        )

        targets = validate_membership_targets(
            user_result, group_result, user_id, group_id, "Cannot add user to group."
        )
        if targets.is_err():
            return targets

        user, group = targets.value
        result = await self.groups.add_user_to_group(user.id, group.id)
        return result.tap(logger.info)
