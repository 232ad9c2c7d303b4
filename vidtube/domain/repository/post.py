"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence
from uuid import UUID

from vidtube.domain.model.post import Post
from vidtube.domain.value import PostId, UserId


class PostRepository(ABC):
    """Repository for Post entity."""

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_owner(
        self, owner_id: UserId, limit: int = 10, offset: int = 0
    ) -> list[Post]:
        """Find posts by a user, newest first.

        Args:
            owner_id: The owner's user ID
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            Posts ordered by creation time descending, then ID ascending
        """
        pass

    @abstractmethod
    async def count_by_owner(self, owner_id: UserId) -> int:
        """Count posts by a user."""
        pass

    @abstractmethod
    async def find_existing_ids(self, ids: Sequence[UUID]) -> set[UUID]:
        """Return the subset of ``ids`` that still exist."""
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post.

        Returns:
            True if the post was deleted, False if it did not exist
        """
        pass
