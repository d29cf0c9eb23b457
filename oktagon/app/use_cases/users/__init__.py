"""
User Management Use Cases

All user lifecycle business logic.
"""

from .activate_user_use_case import ActivateUserUseCase
from .create_user_use_case import CreateUserUseCase
from .deactivate_user_use_case import DeactivateUserUseCase
from .delete_user_use_case import DeleteUserUseCase
from .dtos import CreateUserResponse
from .expire_password_use_case import ExpirePasswordUseCase
from .list_users_use_case import ListUsersUseCase

__all__ = [
    # Use Cases
    "ActivateUserUseCase",
    "CreateUserUseCase",
    "DeactivateUserUseCase",
    "DeleteUserUseCase",
    "ExpirePasswordUseCase",
    "ListUsersUseCase",
    # DTOs
    "CreateUserResponse",
]
