"""
Use Cases

Organized into domain folders:
- users/: User lifecycle
- groups/: Group membership
- apps/: Applications
- organisation/: Ping and system log
"""

from .apps import ListAppsUseCase
from .groups import (
    AddUserToGroupUseCase,
    ListGroupsUseCase,
    RemoveUserFromGroupUseCase,
)
from .organisation import GetLogsUseCase, PingUseCase
from .users import (
    ActivateUserUseCase,
    CreateUserUseCase,
    DeactivateUserUseCase,
    DeleteUserUseCase,
    ExpirePasswordUseCase,
    ListUsersUseCase,
)

__all__ = [
    # Users
    "ActivateUserUseCase",
    "CreateUserUseCase",
    "DeactivateUserUseCase",
    "DeleteUserUseCase",
    "ExpirePasswordUseCase",
    "ListUsersUseCase",
    # Groups
    "AddUserToGroupUseCase",
    "ListGroupsUseCase",
    "RemoveUserFromGroupUseCase",
    # Apps
    "ListAppsUseCase",
    # Organisation
    "GetLogsUseCase",
    "PingUseCase",
]
