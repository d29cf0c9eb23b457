"""
Create User Use Case

Creates a new active user with a generated password.
"""

import logging

from oktagon.app.services import IUserService
from oktagon.libs.result import Error, Result, Return

from .dtos import CreateUserResponse

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """
    Use case for creating a user.

    Business Rules:
    - No other user may have the same login
    - The user is created active with the supplied password
    """

    def __init__(self, users: IUserService):
        self.users = users

    async def execute(
        self, email: str, first_name: str, last_name: str, password: str
    ) -> Result[CreateUserResponse]:
        existing = await self.users.get_user(email)
        if existing.is_err():
            return existing

        if existing.value is not None:
            return Return.err(
                Error(
                    "USER_ALREADY_EXISTS",
                    f"User [{email}] already exists with id [{existing.value.id}]. "
                    "Can not create a new user.",
                )
            )

        created = await self.users.create_user(email, first_name, last_name, password)
        if created.is_err():
            return created

        user = created.value
        logger.info(f"Created new user with login [{user.login}] and name [{user.name}].")
        return Return.ok(CreateUserResponse(user=user, password=password))
