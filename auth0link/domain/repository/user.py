"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from auth0link.domain.model.user import User
from auth0link.domain.value import UserId


class UserRepository(ABC):
    """Repository for the local User aggregate.

    The storage layer enforces email uniqueness.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email.

        Args:
            email: The user's email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_sub(self, sub: str) -> Optional[User]:
        """Find the user linked to a remote account.

        Args:
            sub: Identity provider user id

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass
