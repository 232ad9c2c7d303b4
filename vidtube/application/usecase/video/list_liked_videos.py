"""List liked videos use case."""

from uuid import UUID

from vidtube.application.usecase.base import BaseUseCase
from vidtube.application.usecase.common import PageQuery, PageResponse, VideoItem
from vidtube.config import PaginationSettings
from vidtube.domain.service import AggregationService
from vidtube.domain.value import UserId


class ListLikedVideosRequest(PageQuery):
    """List liked videos request."""

    user_id: str  # User ID from authenticated user


class ListLikedVideosUseCase(BaseUseCase):
    """Use case for listing the videos the current user liked."""

    def __init__(
        self,
        aggregation_service: AggregationService,
        pagination_settings: PaginationSettings,
    ) -> None:
        """Initialize list liked videos use case.

        Args:
            aggregation_service: Aggregation domain service
            pagination_settings: Pagination limits
        """
        self.aggregation_service = aggregation_service
        self.pagination_settings = pagination_settings

    async def execute(self, request: ListLikedVideosRequest) -> PageResponse[VideoItem]:
        """Execute list liked videos flow."""
        page = await self.aggregation_service.list_liked_videos(
            UserId(UUID(request.user_id)),
            request.to_page_request(self.pagination_settings),
        )
        return PageResponse[VideoItem].from_page(
            page, [VideoItem.from_view(v) for v in page.items]
        )
