"""Delete video use case."""

from uuid import UUID

from pydantic import BaseModel

from vidtube.application.usecase.base import BaseUseCase
from vidtube.application.usecase.common import APIModel
from vidtube.domain.service import CascadeService, VideoService
from vidtube.domain.value import ReactionTargetKind, UserId, VideoId


class DeleteVideoRequest(BaseModel):
    """Delete video request."""

    video_id: str
    user_id: str  # User ID from authenticated user


class DeleteVideoResponse(APIModel):
    """Delete video response."""

    video_id: str
    comments_removed: int
    reactions_removed: int


class DeleteVideoUseCase(BaseUseCase):
    """Use case for deleting a video with its comments and likes."""

    def __init__(
        self, video_service: VideoService, cascade_service: CascadeService
    ) -> None:
        """Initialize delete video use case.

        Args:
            video_service: Video domain service
            cascade_service: Cascade coordinator
        """
        self.video_service = video_service
        self.cascade_service = cascade_service

    async def execute(self, request: DeleteVideoRequest) -> DeleteVideoResponse:
        """Execute delete video flow.

        The video is deleted first, then its dependents.

        Raises:
            NotFoundError: If the video does not exist
            NotAuthorizedError: If the user does not own the video
            CascadeIncompleteError: If dependent cleanup failed
        """
        video = await self.video_service.delete_owned(
            VideoId(UUID(request.video_id)), UserId(UUID(request.user_id))
        )
        report = await self.cascade_service.on_entity_deleted(
            ReactionTargetKind.VIDEO, video.id
        )

        return DeleteVideoResponse(
            video_id=str(video.id),
            comments_removed=report.comments_removed,
            reactions_removed=report.reactions_removed,
        )
