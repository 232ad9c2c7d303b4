"""User domain service."""

from typing import Sequence

import logfire
from pydantic import ValidationError as PydanticValidationError

from vidtube.domain.error import NotFoundError
from vidtube.domain.model import OwnerProfile, User
from vidtube.domain.model.view import owner_profile
from vidtube.domain.repository import UserRepository
from vidtube.domain.value import UserId, Username

from .base import Service


class UserService(Service):
    """Domain service for user (channel) lookups."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_by_username(self, username: str) -> User:
        """Get user by username.

        A malformed username cannot belong to anyone, so it reads as not found.

        Raises:
            NotFoundError: If no user has this username
        """
        with logfire.span("user_service.get_by_username", username=username):
            try:
                parsed = Username(username)
            except PydanticValidationError as e:
                raise NotFoundError("User", username) from e

            user = await self.user_repository.find_by_username(parsed)
            if not user:
                logfire.warn("User not found", username=username)
                raise NotFoundError("User", username)
            return user

    async def get_profiles(
        self, user_ids: Sequence[UserId]
    ) -> dict[UserId, OwnerProfile]:
        """Resolve public profiles for many users in one query.

        Unknown IDs are left out of the result.
        """
        if not user_ids:
            return {}
        users = await self.user_repository.find_by_ids(list(set(user_ids)))
        return {user_id: owner_profile(user) for user_id, user in users.items()}
