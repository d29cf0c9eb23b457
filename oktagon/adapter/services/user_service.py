from typing import List, Optional
from urllib.parse import quote

from oktagon.adapter.errors import OKTA_FAILURES, api_error
from oktagon.adapter.okta_client import OktaClient
from oktagon.app.services import IUserService
from oktagon.domain.entities import Group, PasswordExpiration, User
from oktagon.libs.result import Error, Result, Return


class OktaUserService(IUserService):
    """User service implementation backed by the Okta users API"""

    def __init__(self, client: OktaClient):
        self.client = client

    async def get_user(self, user_id: str) -> Result[Optional[User]]:
        """Get user by ID or login"""
        try:
            payload = await self.client.get_optional(f"/users/{quote(user_id, safe='')}")
        except OKTA_FAILURES as exc:
            return Return.err(api_error(f"retrieve user [{user_id}]", exc))
        return Return.ok(None if payload is None else User.from_okta(payload))

    async def create_user(
        self, email: str, first_name: str, last_name: str, password: str
    ) -> Result[User]:
        """Create an active user"""
        body = {
            "profile": {
                "firstName": first_name,
                "lastName": last_name,
                "email": email,
                "login": email,
            },
            "credentials": {"password": {"value": password}},
        }
        try:
            response = await self.client.request(
                "POST", "/users", params={"activate": "true"}, json=body
            )
            return Return.ok(User.from_okta(response.json()))
        except OKTA_FAILURES as exc:
            return Return.err(api_error(f"create user [{email}]", exc))

    async def delete_user(self, user_id: str) -> Result[User]:
        """Delete a deprovisioned user"""
        try:
            payload = await self.client.get_optional(f"/users/{quote(user_id, safe='')}")
            if payload is None:
                return Return.err(
                    Error("USER_NOT_FOUND", f"User [{user_id}] does not exist. Can not delete.")
                )
            user = User.from_okta(payload)
            await self.client.request("DELETE", f"/users/{user.id}")
            return Return.ok(user)
        except OKTA_FAILURES as exc:
            return Return.err(api_error(f"delete user [{user_id}]", exc))

    async def _refetch_after(self, user_id: str, operation: str) -> Result[User]:
        """Read the user back after a lifecycle change; a vanished user is inconsistent state"""
        payload = await self.client.get_optional(f"/users/{quote(user_id, safe='')}")
        missing = Error(
            "INCONSISTENT_STATE", f"User [{user_id}] could not be found after {operation}."
        )
        return Return.from_optional(payload, missing).map(User.from_okta)

    async def deactivate_user(self, user_id: str) -> Result[User]:
        """Deactivate a user"""
        try:
            await self.client.request(
                "POST", f"/users/{quote(user_id, safe='')}/lifecycle/deactivate"
            )
            return await self._refetch_after(user_id, "deactivation")
        except OKTA_FAILURES as exc:
            return Return.err(api_error(f"deactivate user [{user_id}]", exc))

    async def activate_user(self, user_id: str, send_email: bool) -> Result[User]:
        """Activate a user, optionally sending the activation email"""
        try:
            await self.client.request(
                "POST",
                f"/users/{quote(user_id, safe='')}/lifecycle/activate",
                params={"sendEmail": str(send_email).lower()},
            )
            return await self._refetch_after(user_id, "activation")
        except OKTA_FAILURES as exc:
            return Return.err(api_error(f"activate user [{user_id}]", exc))

    async def list_users(self) -> Result[List[User]]:
        """List all users"""
        try:
            payloads = await self.client.paginate("/users")
            return Return.ok([User.from_okta(payload) for payload in payloads])
        except OKTA_FAILURES as exc:
            return Return.err(api_error("list users", exc))

    async def list_users_in_group(self, group: Group) -> Result[List[User]]:
        """List the members of a group"""
        try:
            payloads = await self.client.paginate(f"/groups/{group.id}/users")
            return Return.ok([User.from_okta(payload) for payload in payloads])
        except OKTA_FAILURES as exc:
            return Return.err(api_error(f"list users in group [{group.id}]", exc))

    async def expire_password_and_get_temporary_password(
        self, user_id: str
    ) -> Result[PasswordExpiration]:
        """Expire the password and issue a temporary one"""
        try:
            response = await self.client.request(
                "POST",
                f"/users/{quote(user_id, safe='')}/lifecycle/expire_password",
                params={"tempPassword": "true"},
            )
            temporary_password = response.json()["tempPassword"]
            refetched = await self._refetch_after(user_id, "password expiration")
            return refetched.map(
                lambda user: PasswordExpiration(
                    user=user, temporary_password=temporary_password
                )
            )
        except OKTA_FAILURES as exc:
            return Return.err(api_error(f"expire password for user [{user_id}]", exc))
