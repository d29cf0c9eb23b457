"""Fake Okta organisation for adapter and CLI tests"""

import asyncio
import json
from typing import Any, Dict, List, Optional, Set, Tuple

import httpx


ORGANISATION_URL = "https://acme.okta.com"
ACCESS_TOKEN = "access-token"
TEMPORARY_PASSWORD = "tmp-secret"


class FakeOkta:
    """In-memory Okta organisation served through httpx.MockTransport"""

    def __init__(self):
        self.users: Dict[str, Dict[str, Any]] = {}
        self.groups: Dict[str, Dict[str, Any]] = {}
        self.members: Set[Tuple[str, str]] = set()
        self.apps: List[Dict[str, Any]] = []
        self.events: List[Dict[str, Any]] = []
        self.requests: List[httpx.Request] = []
        self.token_status = 200
        self.ping_status = 200
        self.failing_paths: Dict[str, int] = {}
        # Lifecycle operations after which the user disappears
        self.vanishing_after: Set[str] = set()

    def add_user(
        self, user_id: str, login: str, status: str = "ACTIVE", first_name="Jane", last_name="Doe"
    ):
        self.users[user_id] = {
            "id": user_id,
            "status": status,
            "profile": {
                "login": login,
                "email": login,
                "firstName": first_name,
                "lastName": last_name,
            },
        }
        return self.users[user_id]

    def add_group(self, group_id: str, name: str):
        self.groups[group_id] = {"id": group_id, "type": "OKTA_GROUP", "profile": {"name": name}}
        return self.groups[group_id]

    def find_user(self, key: str) -> Optional[Dict[str, Any]]:
        if key in self.users:
            return self.users[key]
        for user in self.users.values():
            if user["profile"]["login"] == key:
                return user
        return None

    def calls(self, method: str, path: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]

    async def async_handler(self, request: httpx.Request) -> httpx.Response:
        """Yields to the event loop before answering, like a real network call"""
        await asyncio.sleep(0)
        return self.handler(request)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if path == "/oauth2/v1/token":
            if self.token_status != 200:
                return httpx.Response(self.token_status, json={"error": "invalid_client"})
            return httpx.Response(200, json={"access_token": ACCESS_TOKEN, "token_type": "Bearer"})

        if path == "/oauth2/default/.well-known/oauth-authorization-server":
            return httpx.Response(self.ping_status, json={"issuer": ORGANISATION_URL})

        if request.headers.get("Authorization") != f"Bearer {ACCESS_TOKEN}":
            return httpx.Response(401, json={"errorCode": "E0000011"})

        if path in self.failing_paths:
            return httpx.Response(self.failing_paths[path], json={"errorCode": "E0000009"})

        parts = path.removeprefix("/api/v1/").split("/")
        return self.route(request, parts)

    def route(self, request: httpx.Request, parts: List[str]) -> httpx.Response:
        method = request.method
        params = request.url.params

        if parts == ["users"] and method == "GET":
            return self.page(list(self.users.values()), params, "users")

        if parts == ["users"] and method == "POST":
            body = json.loads(request.content)
            status = "ACTIVE" if params.get("activate") == "true" else "STAGED"
            profile = body["profile"]
            user = self.add_user(
                f"00u{len(self.users) + 1}",
                profile["login"],
                status,
                profile["firstName"],
                profile["lastName"],
            )
            return httpx.Response(200, json=user)

        if parts[0] == "users":
            user = self.find_user(parts[1])
            if user is None:
                return httpx.Response(404, json={"errorCode": "E0000007"})

            if len(parts) == 2 and method == "GET":
                return httpx.Response(200, json=user)
            if len(parts) == 2 and method == "DELETE":
                del self.users[user["id"]]
                return httpx.Response(204)
            if parts[2:] == ["groups"]:
                return httpx.Response(
                    200,
                    json=[self.groups[g] for g, u in sorted(self.members) if u == user["id"]],
                )
            if parts[2] == "lifecycle":
                return self.lifecycle(user, parts[3])

        if parts == ["groups"]:
            return httpx.Response(200, json=list(self.groups.values()))

        if parts[0] == "groups":
            group = self.groups.get(parts[1])
            if group is None:
                return httpx.Response(404, json={"errorCode": "E0000007"})
            if len(parts) == 2:
                return httpx.Response(200, json=group)
            if len(parts) == 3:
                members = [self.users[u] for g, u in sorted(self.members) if g == group["id"]]
                return httpx.Response(200, json=members)
            if method == "PUT":
                self.members.add((group["id"], parts[3]))
                return httpx.Response(204)
            if method == "DELETE":
                self.members.discard((group["id"], parts[3]))
                return httpx.Response(204)

        if parts == ["apps"]:
            return httpx.Response(200, json=self.apps)

        if parts == ["logs"]:
            return httpx.Response(200, json=self.events)

        return httpx.Response(404, json={"errorCode": "E0000022"})

    def lifecycle(self, user: Dict[str, Any], operation: str) -> httpx.Response:
        if operation in self.vanishing_after:
            del self.users[user["id"]]
        if operation == "activate":
            user["status"] = "ACTIVE"
            return httpx.Response(200, json={})
        if operation == "deactivate":
            user["status"] = "DEPROVISIONED"
            return httpx.Response(200, json={})
        if operation == "expire_password":
            user["status"] = "PASSWORD_EXPIRED"
            return httpx.Response(200, json={"tempPassword": TEMPORARY_PASSWORD})
        return httpx.Response(404, json={"errorCode": "E0000022"})

    def page(self, items: List[Dict[str, Any]], params: httpx.QueryParams, resource: str):
        """One item per page so that Link rel="next" is exercised"""
        after = params.get("after")
        ids = [item["id"] for item in items]
        start = ids.index(after) + 1 if after in ids else 0
        chunk = items[start:start + 1]
        headers = {}
        if start + 1 < len(items):
            next_url = f"{ORGANISATION_URL}/api/v1/{resource}?after={chunk[0]['id']}&limit=1"
            headers["Link"] = f'<{next_url}>; rel="next"'
        return httpx.Response(200, json=chunk, headers=headers)
