"""In-memory user repository for testing."""

from typing import Optional

from auth0link.domain.model.user import User
from auth0link.domain.repository.user import UserRepository
from auth0link.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self._users.get(user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def find_by_sub(self, sub: str) -> Optional[User]:
        for user in self._users.values():
            if user.sub == sub:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save or update a user.

        Raises:
            ValueError: If another user already has this email
        """
        for other in self._users.values():
            if other.email == user.email and other.id != user.id:
                raise ValueError(f"Email already in use: {user.email}")
        self._users[user.id] = user
        return user
