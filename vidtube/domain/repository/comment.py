"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence
from uuid import UUID

from vidtube.domain.model.comment import Comment
from vidtube.domain.value import CommentId, VideoId


class CommentRepository(ABC):
    """Repository for Comment entity."""

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_video(
        self, video_id: VideoId, limit: int = 10, offset: int = 0
    ) -> list[Comment]:
        """Find comments on a video, newest first.

        Args:
            video_id: The video ID
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            Comments ordered by creation time descending, then ID ascending
        """
        pass

    @abstractmethod
    async def count_by_video(self, video_id: VideoId) -> int:
        """Count comments on a video."""
        pass

    @abstractmethod
    async def find_ids_by_video(self, video_id: VideoId) -> list[CommentId]:
        """Find the IDs of every comment on a video."""
        pass

    @abstractmethod
    async def find_video_ids(self) -> set[VideoId]:
        """Return every video ID that at least one comment points at."""
        pass

    @abstractmethod
    async def find_existing_ids(self, ids: Sequence[UUID]) -> set[UUID]:
        """Return the subset of ``ids`` that still exist."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment.

        Returns:
            True if the comment was deleted, False if it did not exist
        """
        pass

    @abstractmethod
    async def delete_by_ids(self, comment_ids: Sequence[CommentId]) -> int:
        """Delete many comments.

        Returns:
            Number of comments deleted
        """
        pass
