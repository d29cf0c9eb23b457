from .groups import add_user_to_group, list_groups, remove_user_from_group
from .organisation import list_apps, logs, ping
from .users import (
    activate_user,
    create_user,
    deactivate_user,
    delete_user,
    expire_password,
    list_users,
)

__all__ = [
    # Users
    "activate_user",
    "create_user",
    "deactivate_user",
    "delete_user",
    "expire_password",
    "list_users",
    # Groups
    "add_user_to_group",
    "list_groups",
    "remove_user_from_group",
    # Organisation
    "list_apps",
    "logs",
    "ping",
]
