"""
Okta Configuration

Connection settings for an Okta organisation and the organisation URL contract.
"""

from typing import List
from urllib.parse import urlsplit

from pydantic import BaseModel, HttpUrl, TypeAdapter, ValidationError

from oktagon.libs.result import Error, Result, Return

URL_SCHEME_PREFIX = "https://"
OKTA_DOMAIN_SUFFIX = ".okta.com"
ADMIN_SUFFIX = "-admin"

_http_url = TypeAdapter(HttpUrl)


class OktaConfiguration(BaseModel):
    """Configuration required to create an Okta client"""

    client_id: str
    private_key: str
    organisation_url: str

    @property
    def token_url(self) -> str:
        return f"{self.organisation_url}/oauth2/v1/token"

    @property
    def api_url(self) -> str:
        return f"{self.organisation_url}/api/v1"


def organisation_url_issues(url: str) -> List[str]:
    """Every rule of the organisation URL contract that url breaks"""
    issues = []

    try:
        _http_url.validate_python(url)
    except ValidationError:
        issues.append("Invalid url")

    if not url.startswith(URL_SCHEME_PREFIX):
        issues.append(f"URL must start with [{URL_SCHEME_PREFIX}].")

    if not url.endswith(OKTA_DOMAIN_SUFFIX):
        issues.append(f"URL must end with [{OKTA_DOMAIN_SUFFIX}].")

    if len(url) < len(URL_SCHEME_PREFIX) + 1 + len(OKTA_DOMAIN_SUFFIX):
        issues.append("Domain name must be at least 1 character long.")

    hostname = urlsplit(url).hostname or ""
    if hostname.split(".")[0].endswith(ADMIN_SUFFIX):
        issues.append(
            'Organisation URL should not be the admin URL. Please remove "-admin" and try again.'
        )

    return issues


def parse_organisation_url(url: str) -> Result[str]:
    """
    Validate an organisation URL before any network call is made.

    Args:
        url: Organisation URL as given on the command line

    Returns:
        Result with the URL, or INVALID_URL Error listing every broken rule
    """
    issues = organisation_url_issues(url)
    if issues:
        return Return.err(
            Error("INVALID_URL", f"Client error. Invalid URL [{url}].", cause=issues)
        )
    return Return.ok(url)
