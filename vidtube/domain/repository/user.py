"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from vidtube.domain.model.user import User
from vidtube.domain.value import UserId, Username


class UserRepository(ABC):
    """Repository for User aggregate."""

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
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username.

        Args:
            username: The user's username

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> dict[UserId, User]:
        """Find many users at once (batch query).

        Args:
            user_ids: IDs to look up; duplicates are allowed

        Returns:
            Mapping of ID to user for the IDs that exist
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        pass
