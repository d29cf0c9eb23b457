"""
Group Management Use Cases
"""

from .add_user_to_group_use_case import AddUserToGroupUseCase
from .list_groups_use_case import ListGroupsUseCase
from .remove_user_from_group_use_case import RemoveUserFromGroupUseCase

__all__ = [
    "AddUserToGroupUseCase",
    "ListGroupsUseCase",
    "RemoveUserFromGroupUseCase",
]
