"""
Oktagon Domain Entities

Users, groups, apps and the connection configuration.
"""

from .enums import OutputFormat, UserOperation, UserStatus

from .user import ActivatableUser, PasswordExpirableUser, PasswordExpiration, User
from .group import Group
from .app import App
from .configuration import OktaConfiguration, parse_organisation_url

__all__ = [
    # Enums
    "UserStatus",
    "UserOperation",
    "OutputFormat",
    # Entities
    "User",
    "ActivatableUser",
    "PasswordExpirableUser",
    "PasswordExpiration",
    "Group",
    "App",
    "OktaConfiguration",
    "parse_organisation_url",
]
