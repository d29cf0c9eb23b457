"""
User Entity

Subset of the Okta user resource that the tool works with.
"""

from typing import Any, Dict, NewType

from pydantic import BaseModel, computed_field

from .enums import UserStatus


class User(BaseModel):
    """
    User entity - a snapshot of an Okta account.

    Business Rules:
    - Fetched fresh before every mutating operation, never cached
    - name joins first and last name, empty parts omitted
    - deactivated is derived from status
    """

    id: str
    login: str
    email: str
    name: str = ""
    status: UserStatus

    @computed_field
    @property
    def deactivated(self) -> bool:
        return self.status == UserStatus.deprovisioned

    @classmethod
    def from_okta(cls, payload: Dict[str, Any]) -> "User":
        profile = payload.get("profile") or {}
        name = " ".join(
            part
            for part in (profile.get("firstName"), profile.get("lastName"))
            if part
        )
        return cls(
            id=payload["id"],
            login=profile.get("login", ""),
            email=profile.get("email", ""),
            name=name,
            status=UserStatus(payload["status"]),
        )


# Narrowed users. Only the validators in oktagon.app.validators produce these;
# at runtime they are the same User object.
ActivatableUser = NewType("ActivatableUser", User)
PasswordExpirableUser = NewType("PasswordExpirableUser", User)


class PasswordExpiration(BaseModel):
    """User whose password was expired, with the issued temporary password"""

    user: User
    temporary_password: str = ""
