"""
User repository port (interface).

This defines the contract for admin user persistence operations.
Implementations are in the infrastructure layer.
"""
import uuid
from abc import ABC, abstractmethod
from typing import List, Optional

from accounts.domain.user import AdminUser


class UserRepository(ABC):
    """
    Abstract repository for AdminUser entities.

    Passwords never leave the repository: callers hand over raw passwords
    and ask it to verify credentials.
    """

    @abstractmethod
    async def add(self, user: AdminUser, raw_password: str) -> AdminUser:
        """
        Persist a new user with a password.

        Args:
            user: AdminUser entity to add
            raw_password: Password to store

        Returns:
            Saved user entity
        """
        pass

    @abstractmethod
    async def save(self, user: AdminUser) -> AdminUser:
        """
        Save changes to an existing user.

        Args:
            user: AdminUser entity to save

        Returns:
            Saved user entity
        """
        pass

    @abstractmethod
    async def find_by_id(self, user_id: uuid.UUID) -> Optional[AdminUser]:
        """
        Find a user by ID.

        Args:
            user_id: User UUID

        Returns:
            AdminUser entity or None if not found
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[AdminUser]:
        """
        Find a user by email (case-insensitive).

        Args:
            email: Sign-in email

        Returns:
            AdminUser entity or None if not found
        """
        pass

    @abstractmethod
    async def list_all(self) -> List[AdminUser]:
        """
        List all users ordered by name.

        Returns:
            List of AdminUser entities
        """
        pass

    @abstractmethod
    async def delete(self, user_id: uuid.UUID) -> None:
        """
        Delete a user.

        Args:
            user_id: User UUID
        """
        pass

    @abstractmethod
    async def set_password(self, user_id: uuid.UUID, raw_password: str) -> None:
        """
        Replace a user's password.

        Args:
            user_id: User UUID
            raw_password: New password
        """
        pass

    @abstractmethod
    async def check_credentials(self, email: str, raw_password: str) -> Optional[AdminUser]:
        """
        Verify an email/password pair.

        Args:
            email: Sign-in email (case-insensitive)
            raw_password: Password to check

        Returns:
            The matching AdminUser, or None
        """
        pass
