from typing import List

from oktagon.adapter.errors import OKTA_FAILURES, api_error
from oktagon.adapter.okta_client import OktaClient
from oktagon.app.services import IAppService
from oktagon.domain.entities import App
from oktagon.libs.result import Result, Return


class OktaAppService(IAppService):
    """App service implementation backed by the Okta apps API"""

    def __init__(self, client: OktaClient):
        self.client = client

    async def list_apps(self) -> Result[List[App]]:
        try:
            payloads = await self.client.paginate("/apps")
            return Return.ok([App.from_okta(payload) for payload in payloads])
        except OKTA_FAILURES as exc:
            return Return.err(api_error("list apps", exc))

    async def list_user_apps(self, user_id: str) -> Result[List[App]]:
        try:
            payloads = await self.client.paginate(
                "/apps", params={"filter": f'user.id eq "{user_id}"'}
            )
            return Return.ok([App.from_okta(payload) for payload in payloads])
        except OKTA_FAILURES as exc:
            return Return.err(api_error("list user apps", exc))
