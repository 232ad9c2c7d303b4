"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from vidtube.application.usecase.base import BaseUseCase
from vidtube.application.usecase.common import APIModel
from vidtube.domain.service import CascadeService, CommentService
from vidtube.domain.value import CommentId, ReactionTargetKind, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str
    user_id: str  # User ID from authenticated user


class DeleteCommentResponse(APIModel):
    """Delete comment response."""

    comment_id: str
    reactions_removed: int


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting a comment with its likes."""

    def __init__(
        self, comment_service: CommentService, cascade_service: CascadeService
    ) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
            cascade_service: Cascade coordinator
        """
        self.comment_service = comment_service
        self.cascade_service = cascade_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the user does not own the comment
            CascadeIncompleteError: If reaction cleanup failed
        """
        comment = await self.comment_service.delete_owned(
            CommentId(UUID(request.comment_id)), UserId(UUID(request.user_id))
        )
        report = await self.cascade_service.on_entity_deleted(
            ReactionTargetKind.COMMENT, comment.id
        )

        return DeleteCommentResponse(
            comment_id=str(comment.id), reactions_removed=report.reactions_removed
        )
