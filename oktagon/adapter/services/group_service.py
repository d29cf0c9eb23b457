from typing import List, Optional
from urllib.parse import quote

from oktagon.adapter.errors import OKTA_FAILURES, api_error
from oktagon.adapter.okta_client import OktaClient
from oktagon.app.services import IGroupService
from oktagon.domain.entities import Group
from oktagon.libs.result import Result, Return


class OktaGroupService(IGroupService):
    """Group service implementation backed by the Okta groups API"""

    def __init__(self, client: OktaClient):
        self.client = client

    async def get_group(self, group_id: str) -> Result[Optional[Group]]:
        try:
            payload = await self.client.get_optional(f"/groups/{quote(group_id, safe='')}")
        except OKTA_FAILURES as exc:
            return Return.err(api_error(f"retrieve group [{group_id}]", exc))
        return Return.ok(None if payload is None else Group.from_okta(payload))

    async def list_groups(self) -> Result[List[Group]]:
        try:
            payloads = await self.client.paginate("/groups")
            return Return.ok([Group.from_okta(payload) for payload in payloads])
        except OKTA_FAILURES as exc:
            return Return.err(api_error("list groups", exc))

    async def list_user_groups(self, user_id: str) -> Result[List[Group]]:
        try:
            payloads = await self.client.paginate(f"/users/{quote(user_id, safe='')}/groups")
            return Return.ok([Group.from_okta(payload) for payload in payloads])
        except OKTA_FAILURES as exc:
            return Return.err(api_error(f"list groups of user [{user_id}]", exc))

    async def add_user_to_group(self, user_id: str, group_id: str) -> Result[str]:
        try:
            await self.client.request("PUT", f"/groups/{group_id}/users/{user_id}")
        except OKTA_FAILURES as exc:
            return Return.err(api_error(f"add user [{user_id}] to group [{group_id}]", exc))
        return Return.ok(f"Added user [{user_id}] to group [{group_id}].")

    async def remove_user_from_group(self, group_id: str, user_id: str) -> Result[str]:
        try:
            await self.client.request("DELETE", f"/groups/{group_id}/users/{user_id}")
        except OKTA_FAILURES as exc:
            return Return.err(
                api_error(f"remove user [{user_id}] from group [{group_id}]", exc)
            )
        return Return.ok(f"Removed user [{user_id}] from group [{group_id}].")
