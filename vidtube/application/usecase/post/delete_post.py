"""Delete post use case."""

from uuid import UUID

from pydantic import BaseModel

from vidtube.application.usecase.base import BaseUseCase
from vidtube.application.usecase.common import APIModel
from vidtube.domain.service import CascadeService, PostService
from vidtube.domain.value import PostId, ReactionTargetKind, UserId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str
    user_id: str  # User ID from authenticated user


class DeletePostResponse(APIModel):
    """Delete post response."""

    post_id: str
    reactions_removed: int


class DeletePostUseCase(BaseUseCase):
    """Use case for deleting a post with its likes."""

    def __init__(
        self, post_service: PostService, cascade_service: CascadeService
    ) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
            cascade_service: Cascade coordinator
        """
        self.post_service = post_service
        self.cascade_service = cascade_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Raises:
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the user does not own the post
            CascadeIncompleteError: If reaction cleanup failed
        """
        post = await self.post_service.delete_owned(
            PostId(UUID(request.post_id)), UserId(UUID(request.user_id))
        )
        report = await self.cascade_service.on_entity_deleted(
            ReactionTargetKind.POST, post.id
        )

        return DeletePostResponse(
            post_id=str(post.id), reactions_removed=report.reactions_removed
        )
