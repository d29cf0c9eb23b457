"""
List Users Use Case
"""

from typing import List, Optional

from oktagon.app.services import IGroupService, IUserService
from oktagon.domain.entities import User
from oktagon.libs.result import Error, Result, Return


class ListUsersUseCase:
    """Lists every user, or the members of one existing group"""

    def __init__(self, users: IUserService, groups: IGroupService):
        self.users = users
        self.groups = groups

    async def execute(self, group_id: Optional[str] = None) -> Result[List[User]]:
        if group_id is None:
            return await self.users.list_users()

        group_result = await self.groups.get_group(group_id)
        if group_result.is_err():
            return group_result
        if group_result.value is None:
            return Return.err(
                Error(
                    "GROUP_NOT_FOUND",
                    f"Group [{group_id}] does not exist. Cannot list users in group.",
                )
            )

        return await self.users.list_users_in_group(group_result.value)
