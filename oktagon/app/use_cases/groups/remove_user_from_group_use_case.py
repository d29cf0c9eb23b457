"""
Remove User From Group Use Case

Removes an existing user from an existing group.
"""

import logging

from oktagon.app.services import IGroupService, IUserService
from oktagon.app.validators import validate_membership_targets
from oktagon.libs.result import Result

logger = logging.getLogger(__name__)


class RemoveUserFromGroupUseCase:
    """
    Use case for removing a user from a group.

    Business Rules:
    - The user is looked up first; a failed user lookup stops the pipeline
    - Missing resources are reported together, group first
    - Removing a user who is not a member still succeeds
    """

    def __init__(self, users: IUserService, groups: IGroupService):
        self.users = users
        self.groups = groups

    async def execute(self, user_id: str, group_id: str) -> Result[str]:
        user_result = await self.users.get_user(user_id)
        if user_result.is_err():
            return user_result

        group_result = await self.groups.get_group(group_id)

        targets = validate_membership_targets(
            user_result, group_result, user_id, group_id, "Cannot remove user from group."
        )
        if targets.is_err():
            return targets

        user, group = targets.value
        result = await self.groups.remove_user_from_group(group.id, user.id)
        return result.tap(logger.info)
