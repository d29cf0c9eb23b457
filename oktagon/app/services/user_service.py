from abc import ABC, abstractmethod
from typing import List, Optional

from oktagon.domain.entities import Group, PasswordExpiration, User
from oktagon.libs.result import Result


class IUserService(ABC):
    """User service interface - application layer"""

    @abstractmethod
    async def get_user(self, user_id: str) -> Result[Optional[User]]:
        """Get user by ID or login, None if the user does not exist"""
        pass

    @abstractmethod
    async def create_user(
        self, email: str, first_name: str, last_name: str, password: str
    ) -> Result[User]:
        """Create an active user with the given password"""
        pass

    @abstractmethod
    async def delete_user(self, user_id: str) -> Result[User]:
        """Delete a deprovisioned user, returning the pre-delete snapshot"""
        pass

    @abstractmethod
    async def deactivate_user(self, user_id: str) -> Result[User]:
        """Deactivate (deprovision) a user"""
        pass

    @abstractmethod
    async def activate_user(self, user_id: str, send_email: bool) -> Result[User]:
        """Activate a staged or deprovisioned user"""
        pass

    @abstractmethod
    async def list_users(self) -> Result[List[User]]:
        """List all users"""
        pass

    @abstractmethod
    async def list_users_in_group(self, group: Group) -> Result[List[User]]:
        """List the members of a group"""
        pass

    @abstractmethod
    async def expire_password_and_get_temporary_password(
        self, user_id: str
    ) -> Result[PasswordExpiration]:
        """Expire the user's password and issue a temporary one"""
        pass
