"""List channel subscribers use case."""

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


class ListChannelSubscribersRequest(PageQuery):
    """List channel subscribers request."""

    channel_id: str
    viewer_id: Optional[str] = None  # Current user ID (if authenticated)


class ListChannelSubscribersResponse(PageResponse[ChannelItem]):
    """Page of subscribers plus the channel's subscriber count."""

    subscriber_count: int


class ListChannelSubscribersUseCase(BaseUseCase):
    """Use case for listing a channel's subscribers."""

    def __init__(
        self,
        aggregation_service: AggregationService,
        pagination_settings: PaginationSettings,
    ) -> None:
        """Initialize list channel subscribers use case.

        Args:
            aggregation_service: Aggregation domain service
            pagination_settings: Pagination limits
        """
        self.aggregation_service = aggregation_service
        self.pagination_settings = pagination_settings

    async def execute(
        self, request: ListChannelSubscribersRequest
    ) -> ListChannelSubscribersResponse:
        """Execute list channel subscribers flow.

        Raises:
            NotFoundError: If the channel does not exist
        """
        page = await self.aggregation_service.list_channel_subscribers(
            channel_id=UserId(UUID(request.channel_id)),
            request=request.to_page_request(self.pagination_settings),
            viewer_id=parse_user_id(request.viewer_id),
        )
        return ListChannelSubscribersResponse.from_page(
            page,
            [ChannelItem.from_view(v) for v in page.items],
            subscriber_count=page.total_items,
        )
