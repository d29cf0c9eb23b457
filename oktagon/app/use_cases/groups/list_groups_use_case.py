"""
List Groups Use Case
"""

from typing import List, Optional

from oktagon.app.services import IGroupService
from oktagon.domain.entities import Group
from oktagon.libs.result import Result


class ListGroupsUseCase:
    """Lists every group, or only the groups a user belongs to"""

    def __init__(self, groups: IGroupService):
        self.groups = groups

    async def execute(self, user_id: Optional[str] = None) -> Result[List[Group]]:
        if user_id is None:
            return await self.groups.list_groups()
        return await self.groups.list_user_groups(user_id)
