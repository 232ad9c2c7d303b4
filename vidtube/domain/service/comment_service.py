"""Comment domain service."""

import logfire

from vidtube.domain.error import NotAuthorizedError, NotFoundError
from vidtube.domain.model.comment import Comment
from vidtube.domain.repository import CommentRepository
from vidtube.domain.value import CommentId, UserId

from .base import Service


class CommentService(Service):
    """Domain service for comment lookups and deletion."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def get_by_id(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If comment not found
        """
        with logfire.span("comment_service.get_by_id", comment_id=str(comment_id)):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            return comment

    async def delete_owned(self, comment_id: CommentId, actor_id: UserId) -> Comment:
        """Delete a comment owned by ``actor_id``.

        Reactions on the comment are left for the cascade coordinator.

        Raises:
            NotFoundError: If comment not found
            NotAuthorizedError: If the actor does not own the comment
        """
        with logfire.span(
            "comment_service.delete_owned",
            comment_id=str(comment_id),
            actor_id=str(actor_id),
        ):
            comment = await self.get_by_id(comment_id)
            if comment.owner_id != actor_id:
                logfire.warn(
                    "Comment delete by non-owner",
                    comment_id=str(comment_id),
                    actor_id=str(actor_id),
                )
                raise NotAuthorizedError(
                    "comment", str(comment_id), str(actor_id), "delete"
                )

            if not await self.comment_repository.delete(comment_id):
                raise NotFoundError("Comment", str(comment_id))

            logfire.info(
                "Comment deleted",
                comment_id=str(comment_id),
                video_id=str(comment.video_id),
            )
            return comment
