"""Get channel stats use case."""

from uuid import UUID

from pydantic import BaseModel

from vidtube.application.usecase.base import BaseUseCase
from vidtube.application.usecase.common import APIModel
from vidtube.domain.service import AggregationService
from vidtube.domain.value import UserId


class GetChannelStatsRequest(BaseModel):
    """Get channel stats request."""

    channel_id: str
    user_id: str  # User ID from authenticated user


class GetChannelStatsResponse(APIModel):
    """Dashboard totals for a channel."""

    channel_id: str
    total_subscribers: int
    total_videos: int
    total_views: int
    total_likes: int


class GetChannelStatsUseCase(BaseUseCase):
    """Use case for the channel owner's dashboard totals."""

    def __init__(self, aggregation_service: AggregationService) -> None:
        """Initialize get channel stats use case.

        Args:
            aggregation_service: Aggregation domain service
        """
        self.aggregation_service = aggregation_service

    async def execute(self, request: GetChannelStatsRequest) -> GetChannelStatsResponse:
        """Execute get channel stats flow.

        Raises:
            NotFoundError: If the channel does not exist
            NotAuthorizedError: If the user is not the channel owner
        """
        stats = await self.aggregation_service.get_channel_stats(
            UserId(UUID(request.channel_id)), UserId(UUID(request.user_id))
        )

        return GetChannelStatsResponse(
            channel_id=str(stats.channel_id),
            total_subscribers=stats.total_subscribers,
            total_videos=stats.total_videos,
            total_views=stats.total_views,
            total_likes=stats.total_likes,
        )
