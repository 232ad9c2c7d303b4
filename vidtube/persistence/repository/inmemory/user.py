"""In-memory user repository for testing."""

from typing import Optional, Sequence

from vidtube.domain.model.user import User
from vidtube.domain.repository.user import UserRepository
from vidtube.domain.value import UserId, Username


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username."""
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> dict[UserId, User]:
        """Find many users at once."""
        return {uid: self._users[uid] for uid in user_ids if uid in self._users}

    async def save(self, user: User) -> User:
        """Save a user."""
        self._users[user.id] = user
        return user
