"""In-memory comment repository for testing."""

from typing import Optional, Sequence
from uuid import UUID

from vidtube.domain.model.comment import Comment
from vidtube.domain.repository.comment import CommentRepository
from vidtube.domain.value import CommentId, VideoId

from ._ordering import newest_first


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    def _on_video(self, video_id: VideoId) -> list[Comment]:
        return [c for c in self._comments.values() if c.video_id == video_id]

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_video(
        self, video_id: VideoId, limit: int = 10, offset: int = 0
    ) -> list[Comment]:
        """Find comments on a video, newest first."""
        return newest_first(self._on_video(video_id))[offset : offset + limit]

    async def count_by_video(self, video_id: VideoId) -> int:
        """Count comments on a video."""
        return len(self._on_video(video_id))

    async def find_ids_by_video(self, video_id: VideoId) -> list[CommentId]:
        """Find the IDs of every comment on a video."""
        return [c.id for c in self._on_video(video_id)]

    async def find_video_ids(self) -> set[VideoId]:
        """Return every video ID that at least one comment points at."""
        return {c.video_id for c in self._comments.values()}

    async def find_existing_ids(self, ids: Sequence[UUID]) -> set[UUID]:
        """Return the subset of ``ids`` that still exist."""
        return {i for i in ids if i in self._comments}

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment."""
        return self._comments.pop(comment_id, None) is not None

    async def delete_by_ids(self, comment_ids: Sequence[CommentId]) -> int:
        """Delete many comments."""
        return sum(
            1 for cid in set(comment_ids) if self._comments.pop(cid, None) is not None
        )
