from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, List, Optional

from oktagon.libs.result import Result


class IOrganisationService(ABC):
    """Organisation-level operations: reachability, credentials and system log"""

    @abstractmethod
    async def ping(self) -> Result[str]:
        """Check that the organisation's authorization server is reachable"""
        pass

    @abstractmethod
    async def validate_credentials(self) -> Result[bool]:
        """Check that the client id and private key can obtain an access token"""
        pass

    @abstractmethod
    async def retrieve_logs(
        self,
        limit: int,
        query: Optional[str] = None,
        filter: Optional[str] = None,
        since: Optional[datetime] = None,
        until: Optional[datetime] = None,
    ) -> Result[List[Dict[str, Any]]]:
        """
        Retrieve system log events.

        Events are returned as raw dictionaries so they can be piped to
        other tools untouched.
        """
        pass
