"""
User Command DTOs

Transient plan objects built by the planner and consumed exactly once by a
CommandRunner.
"""

from dataclasses import dataclass
from typing import Union

from oktagon.app.services import IUserService
from oktagon.domain.entities import PasswordExpiration, User, UserOperation


@dataclass(frozen=True)
class UserCommand:
    """One mutating operation against a validated user"""

    operation: UserOperation
    # ActivatableUser or PasswordExpirableUser depending on operation
    user: User
    service: IUserService
    send_email: bool = False


CommandOutcome = Union[User, PasswordExpiration]
