from typing import Sequence

from oktagon.adapter.okta_client import OktaClient
from oktagon.config import ApplicationConfig
from oktagon.domain.entities import OktaConfiguration


def get_okta_client(configuration: OktaConfiguration, scopes: Sequence[str]) -> OktaClient:
    """OktaClient for one CLI invocation; use as an async context manager"""
    return OktaClient(configuration, scopes, timeout=ApplicationConfig.HTTP_TIMEOUT)
