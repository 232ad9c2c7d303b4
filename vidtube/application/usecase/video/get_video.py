"""Get video use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from vidtube.application.usecase.base import BaseUseCase
from vidtube.application.usecase.common import VideoItem, parse_user_id
from vidtube.domain.service import AggregationService
from vidtube.domain.value import VideoId


class GetVideoRequest(BaseModel):
    """Get video request."""

    video_id: str
    viewer_id: Optional[str] = None  # Current user ID (if authenticated)


class GetVideoUseCase(BaseUseCase):
    """Use case for getting a single video."""

    def __init__(self, aggregation_service: AggregationService) -> None:
        """Initialize get video use case.

        Args:
            aggregation_service: Aggregation domain service
        """
        self.aggregation_service = aggregation_service

    async def execute(self, request: GetVideoRequest) -> VideoItem:
        """Execute get video flow.

        Raises:
            NotFoundError: If the video does not exist
            NotAuthorizedError: If the video is unpublished and not the viewer's
        """
        view = await self.aggregation_service.get_video(
            VideoId(UUID(request.video_id)), parse_user_id(request.viewer_id)
        )
        return VideoItem.from_view(view)
