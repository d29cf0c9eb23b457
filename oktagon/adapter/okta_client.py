"""
Okta HTTP client

Thin async wrapper around httpx that authenticates with the OAuth 2.0 client
credentials grant, using a private-key JWT client assertion.
"""

import asyncio
import json
import logging
import time
import uuid
from typing import Any, Dict, List, Optional, Sequence, Union

import httpx
from jose import jwt
from jose.exceptions import JOSEError

from oktagon.config import ApplicationConfig
from oktagon.domain.entities import OktaConfiguration

logger = logging.getLogger(__name__)

CLIENT_ASSERTION_TYPE = "urn:ietf:params:oauth:client-assertion-type:jwt-bearer"

# Scopes
USERS_READ = "okta.users.read"
USERS_MANAGE = "okta.users.manage"
GROUPS_READ = "okta.groups.read"
GROUPS_MANAGE = "okta.groups.manage"
APPS_READ = "okta.apps.read"
LOGS_READ = "okta.logs.read"


class OktaClientError(Exception):
    """Raised when the client cannot build a request (e.g. unusable private key)"""


class PrivateKeyError(OktaClientError):
    pass


def load_private_key(private_key: str) -> Union[Dict[str, Any], str]:
    """
    Parse the private key given on the command line.

    Args:
        private_key: JWK as a JSON string, or a PEM encoded RSA key

    Returns:
        JWK dictionary or PEM string, as accepted by jose
    """
    stripped = private_key.strip()
    if stripped.startswith("{"):
        return json.loads(stripped)
    return stripped


class OktaClient:
    """
    Okta management API client.

    Business Rules:
    - One access token per client instance, requested lazily, also when
      requests start concurrently
    - Every non-2xx response raises httpx.HTTPStatusError
    - Single resource lookups treat 404 as absent
    - Collections follow Link rel="next" pagination
    """

    def __init__(
        self,
        configuration: OktaConfiguration,
        scopes: Sequence[str],
        timeout: float = ApplicationConfig.HTTP_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.configuration = configuration
        self.scopes = list(scopes)
        self.http = httpx.AsyncClient(
            timeout=timeout,
            transport=transport,
            headers={
                "Accept": "application/json",
                "User-Agent": ApplicationConfig.USER_AGENT,
            },
        )
        self._access_token: Optional[str] = None
        self._token_lock = asyncio.Lock()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.http.aclose()

    def client_assertion(self) -> str:
        """Signed JWT identifying this client to the token endpoint"""
        try:
            key = load_private_key(self.configuration.private_key)
            headers = {"kid": key["kid"]} if isinstance(key, dict) and "kid" in key else None
            now = int(time.time())
            claims = {
                "iss": self.configuration.client_id,
                "sub": self.configuration.client_id,
                "aud": self.configuration.token_url,
                "iat": now,
                "exp": now + ApplicationConfig.TOKEN_LIFETIME_SECONDS,
                "jti": str(uuid.uuid4()),
            }
            return jwt.encode(claims, key, algorithm="RS256", headers=headers)
        except (JOSEError, ValueError, TypeError) as exc:
            raise PrivateKeyError("Failed to decode the private key.") from exc

    async def get_access_token(self) -> str:
        async with self._token_lock:
            if self._access_token is None:
                self._access_token = await self._request_access_token()
        return self._access_token

    async def _request_access_token(self) -> str:
        assertion = self.client_assertion()
        logger.debug(f"Requesting access token for scopes {self.scopes}")
        response = await self.http.post(
            self.configuration.token_url,
            data={
                "grant_type": "client_credentials",
                "scope": " ".join(self.scopes),
                "client_assertion_type": CLIENT_ASSERTION_TYPE,
                "client_assertion": assertion,
            },
        )
        response.raise_for_status()
        return response.json()["access_token"]

    async def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        """
        Authenticated request against the management API.

        Args:
            method: HTTP method
            path: Path below /api/v1, or an absolute URL (pagination links)
            params: Query parameters
            json: JSON body

        Returns:
            The 2xx response
        """
        token = await self.get_access_token()
        url = path if path.startswith("https://") else f"{self.configuration.api_url}{path}"
        logger.debug(f"{method} {url}")
        response = await self.http.request(
            method,
            url,
            params=params,
            json=json,
            headers={"Authorization": f"Bearer {token}"},
        )
        response.raise_for_status()
        return response

    async def get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        response = await self.request("GET", path, params=params)
        return response.json()

    async def get_optional(self, path: str) -> Optional[Dict[str, Any]]:
        """GET a single resource, None when Okta answers 404"""
        try:
            return await self.get_json(path)
        except httpx.HTTPStatusError as exc:
            if exc.response.status_code == 404:
                return None
            raise

    async def paginate(
        self, path: str, params: Optional[Dict[str, Any]] = None
    ) -> List[Dict[str, Any]]:
        items: List[Dict[str, Any]] = []
        next_url: Optional[str] = path
        next_params = {"limit": ApplicationConfig.PAGE_LIMIT, **(params or {})}
        while next_url:
            response = await self.request("GET", next_url, params=next_params)
            items.extend(response.json())
            # The next link already carries the cursor and the original query
            next_link = response.links.get("next")
            next_url = next_link["url"] if next_link else None
            next_params = None
        return items

    async def get_unauthenticated(
        self, path: str, params: Optional[Dict[str, Any]] = None
    ) -> httpx.Response:
        """GET below the organisation URL without a token; status is not checked"""
        url = f"{self.configuration.organisation_url}{path}"
        logger.debug(f"GET {url}")
        return await self.http.get(url, params=params)
