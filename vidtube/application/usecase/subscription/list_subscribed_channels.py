"""List subscribed channels use case."""

from typing import Optional
from uuid import UUID

from vidtube.application.usecase.base import BaseUseCase
from vidtube.application.usecase.common import (
    ChannelItem,
    PageQuery,
    PageResponse,
    parse_user_id,
)
from vidtube.config import PaginationSettings
from vidtube.domain.service import AggregationService
from vidtube.domain.value import UserId


class ListSubscribedChannelsRequest(PageQuery):
    """List subscribed channels request."""

    subscriber_id: str
    viewer_id: Optional[str] = None  # Current user ID (if authenticated)


class ListSubscribedChannelsUseCase(BaseUseCase):
    """Use case for listing the channels a user subscribes to."""

    def __init__(
        self,
        aggregation_service: AggregationService,
        pagination_settings: PaginationSettings,
    ) -> None:
        """Initialize list subscribed channels use case.

        Args:
            aggregation_service: Aggregation domain service
            pagination_settings: Pagination limits
        """
        self.aggregation_service = aggregation_service
        self.pagination_settings = pagination_settings

    async def execute(
        self, request: ListSubscribedChannelsRequest
    ) -> PageResponse[ChannelItem]:
        """Execute list subscribed channels flow.

        Raises:
            NotFoundError: If the subscriber does not exist
        """
        page = await self.aggregation_service.list_subscribed_channels(
            subscriber_id=UserId(UUID(request.subscriber_id)),
            request=request.to_page_request(self.pagination_settings),
            viewer_id=parse_user_id(request.viewer_id),
        )
        return PageResponse[ChannelItem].from_page(
            page, [ChannelItem.from_view(v) for v in page.items]
        )
