"""Get channel profile use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from vidtube.application.usecase.base import BaseUseCase
from vidtube.application.usecase.common import APIModel, parse_user_id
from vidtube.domain.service import AggregationService
from vidtube.domain.value import UserId


class GetChannelProfileRequest(BaseModel):
    """Get channel profile request."""

    channel_id: str
    viewer_id: Optional[str] = None  # Current user ID (if authenticated)


class GetChannelProfileResponse(APIModel):
    """Channel page header."""

    id: str
    username: str
    display_name: str
    avatar_url: Optional[str] = None
    subscriber_count: int
    subscribed_to_count: int
    is_subscribed: bool


class GetChannelProfileUseCase(BaseUseCase):
    """Use case for getting a channel's profile and counts."""

    def __init__(self, aggregation_service: AggregationService) -> None:
        """Initialize get channel profile use case.

        Args:
            aggregation_service: Aggregation domain service
        """
        self.aggregation_service = aggregation_service

    async def execute(
        self, request: GetChannelProfileRequest
    ) -> GetChannelProfileResponse:
        """Execute get channel profile flow.

        Raises:
            NotFoundError: If the channel does not exist
        """
        channel = await self.aggregation_service.get_channel_profile(
            UserId(UUID(request.channel_id)), parse_user_id(request.viewer_id)
        )

        return GetChannelProfileResponse(
            id=str(channel.profile.user_id),
            username=channel.profile.username.root,
            display_name=channel.profile.display_name,
            avatar_url=channel.profile.avatar_url,
            subscriber_count=channel.subscriber_count,
            subscribed_to_count=channel.subscribed_to_count,
            is_subscribed=channel.viewer_is_subscribed,
        )
