from datetime import datetime
from typing import Any, Dict, List, Optional

import httpx

from oktagon.adapter.errors import OKTA_FAILURES, api_error
from oktagon.adapter.okta_client import OktaClient, PrivateKeyError
from oktagon.app.services import IOrganisationService
from oktagon.libs.result import Error, Result, Return

AUTHORIZATION_SERVER_METADATA = "/oauth2/default/.well-known/oauth-authorization-server"
SERVER_RUNNING = "Okta server is up and running."


class OktaOrganisationService(IOrganisationService):
    """Organisation checks and system log backed by the Okta APIs"""

    def __init__(self, client: OktaClient):
        self.client = client

    async def ping(self) -> Result[str]:
        configuration = self.client.configuration
        try:
            response = await self.client.get_unauthenticated(
                AUTHORIZATION_SERVER_METADATA,
                params={"client_id": configuration.client_id},
            )
        except httpx.HTTPError as exc:
            return Return.err(Error("OKTA_API_ERROR", "Failed to ping okta server.", cause=exc))

        status = response.status_code
        if 200 <= status < 300:
            return Return.ok(SERVER_RUNNING)
        if 500 <= status < 600:
            return Return.err(
                Error(
                    "SERVER_UNAVAILABLE",
                    "Server error. Please wait and try again later.",
                    cause=response,
                )
            )
        if 400 <= status < 500:
            return Return.err(
                Error(
                    "INVALID_ARGUMENT",
                    f"Client error. Please check your client id [{configuration.client_id}] "
                    f"and the URL of your organisation [{configuration.organisation_url}].",
                    cause=response,
                )
            )
        return Return.err(
            Error(
                "OKTA_API_ERROR",
                "Unexpected response from pinging okta server.",
                cause=response,
            )
        )

    async def validate_credentials(self) -> Result[bool]:
        try:
            await self.client.get_access_token()
        except PrivateKeyError as exc:
            return Return.err(
                Error("INVALID_CREDENTIALS", "Client error. Please check your private key.", cause=exc)
            )
        except httpx.HTTPStatusError as exc:
            if 400 <= exc.response.status_code < 500:
                return Return.err(
                    Error(
                        "INVALID_CREDENTIALS",
                        "Client error. Please check your private key.",
                        cause=exc,
                    )
                )
            return Return.err(Error("OKTA_API_ERROR", "Failed to get access token.", cause=exc))
        except OKTA_FAILURES as exc:
            return Return.err(Error("OKTA_API_ERROR", "Failed to get access token.", cause=exc))
        return Return.ok(True)

    async def retrieve_logs(
        self,
        limit: int,
        query: Optional[str] = None,
        filter: Optional[str] = None,
        since: Optional[datetime] = None,
        until: Optional[datetime] = None,
    ) -> Result[List[Dict[str, Any]]]:
        params: Dict[str, Any] = {"limit": limit}
        if query:
            params["q"] = query
        if filter:
            params["filter"] = filter
        if since:
            params["since"] = since.isoformat()
        if until:
            params["until"] = until.isoformat()

        try:
            events = await self.client.get_json("/logs", params=params)
        except OKTA_FAILURES as exc:
            return Return.err(api_error("retrieve logs", exc))
        return Return.ok(list(events)[:limit])
