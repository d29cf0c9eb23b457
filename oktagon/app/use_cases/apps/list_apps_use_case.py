"""
List Apps Use Case
"""

from typing import List, Optional

from oktagon.app.services import IAppService
from oktagon.domain.entities import App
from oktagon.libs.result import Result


class ListAppsUseCase:
    """Lists every app, or only the apps assigned to a user"""

    def __init__(self, apps: IAppService):
        self.apps = apps

    async def execute(self, user_id: Optional[str] = None) -> Result[List[App]]:
        if user_id is None:
            return await self.apps.list_apps()
        return await self.apps.list_user_apps(user_id)
