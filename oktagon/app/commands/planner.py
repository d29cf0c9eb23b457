"""
Command Planner

Turns a validated, narrowed user into the ordered list of commands to run.
"""

from typing import List

from oktagon.app.services import IUserService
from oktagon.domain.entities import ActivatableUser, PasswordExpirableUser, UserOperation

from .dtos import UserCommand


def plan_activation(
    service: IUserService, user: ActivatableUser, send_email: bool = False
) -> List[UserCommand]:
    return [
        UserCommand(
            operation=UserOperation.activate,
            user=user,
            service=service,
            send_email=send_email,
        )
    ]


def plan_password_expiration(
    service: IUserService, user: PasswordExpirableUser
) -> List[UserCommand]:
    return [
        UserCommand(
            operation=UserOperation.expire_password,
            user=user,
            service=service,
        )
    ]
