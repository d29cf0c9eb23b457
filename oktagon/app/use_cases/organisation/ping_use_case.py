"""
Ping Use Case

Checks that the organisation is reachable and the credentials are valid.
"""

import logging

from oktagon.app.services import IOrganisationService
from oktagon.libs.result import Result

logger = logging.getLogger(__name__)


class PingUseCase:
    """
    Use case for pinging an Okta organisation.

    Business Rules:
    - The authorization server is pinged first
    - Credentials are only checked once the server answered with 2xx
    """

    def __init__(self, organisation: IOrganisationService):
        self.organisation = organisation

    async def execute(self) -> Result[bool]:
        logger.info("Pinging okta server...")
        ping = await self.organisation.ping()
        if ping.is_err():
            return ping

        logger.info(ping.value)
        return await self.organisation.validate_credentials()
