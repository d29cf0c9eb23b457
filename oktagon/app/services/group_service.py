from abc import ABC, abstractmethod
from typing import List, Optional

from oktagon.domain.entities import Group
from oktagon.libs.result import Result


class IGroupService(ABC):
    """Group service interface - application layer"""

    @abstractmethod
    async def get_group(self, group_id: str) -> Result[Optional[Group]]:
        """Get group by ID, None if the group does not exist"""
        pass

    @abstractmethod
    async def list_groups(self) -> Result[List[Group]]:
        """List all groups"""
        pass

    @abstractmethod
    async def list_user_groups(self, user_id: str) -> Result[List[Group]]:
        """List the groups a user belongs to"""
        pass

    @abstractmethod
    async def add_user_to_group(self, user_id: str, group_id: str) -> Result[str]:
        """Add a user to a group, returns a confirmation message"""
        pass

    @abstractmethod
    async def remove_user_from_group(self, group_id: str, user_id: str) -> Result[str]:
        """Remove a user from a group, returns a confirmation message"""
        pass
