from abc import ABC, abstractmethod
from typing import List

from oktagon.domain.entities import App
from oktagon.libs.result import Result


class IAppService(ABC):
    """App service interface - application layer"""

    @abstractmethod
    async def list_apps(self) -> Result[List[App]]:
        """List all apps"""
        pass

    @abstractmethod
    async def list_user_apps(self, user_id: str) -> Result[List[App]]:
        """List the apps assigned to a user"""
        pass
