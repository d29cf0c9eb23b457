"""
Oktagon Domain Enums

Enumeration types used across domain entities.
"""

from enum import Enum


class UserStatus(str, Enum):
    """Okta user lifecycle status (wire values)"""

    active = "ACTIVE"
    staged = "STAGED"
    provisioned = "PROVISIONED"
    password_expired = "PASSWORD_EXPIRED"
    recovery = "RECOVERY"
    locked_out = "LOCKED_OUT"
    suspended = "SUSPENDED"
    deprovisioned = "DEPROVISIONED"


class UserOperation(str, Enum):
    """Mutating user operations that go through the command planner"""

    activate = "activate"
    expire_password = "expire_password"


class OutputFormat(str, Enum):
    """Report formats for the logs command"""

    json = "json"
    table = "table"
