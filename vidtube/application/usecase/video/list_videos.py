"""List videos use case."""

from typing import Optional
from uuid import UUID

import logfire

from vidtube.application.usecase.base import BaseUseCase
from vidtube.application.usecase.common import (
    PageQuery,
    PageResponse,
    VideoItem,
    parse_user_id,
)
from vidtube.config import PaginationSettings
from vidtube.domain.service import AggregationService
from vidtube.domain.value import SortDirection, UserId, VideoSortField


class ListVideosRequest(PageQuery):
    """List videos request."""

    sort_by: VideoSortField = VideoSortField.CREATED_AT
    sort_type: SortDirection = SortDirection.DESC
    owner_id: Optional[str] = None  # Only this channel's videos
    viewer_id: Optional[str] = None  # Current user ID (if authenticated)


class ListVideosUseCase(BaseUseCase):
    """Use case for listing videos with sorting and pagination."""

    def __init__(
        self,
        aggregation_service: AggregationService,
        pagination_settings: PaginationSettings,
    ) -> None:
        """Initialize list videos use case.

        Args:
            aggregation_service: Aggregation domain service
            pagination_settings: Pagination limits
        """
        self.aggregation_service = aggregation_service
        self.pagination_settings = pagination_settings

    async def execute(self, request: ListVideosRequest) -> PageResponse[VideoItem]:
        """Execute list videos flow.

        Args:
            request: List videos request with filters and pagination

        Returns:
            Page of videos with like counts and the viewer's flags
        """
        page = await self.aggregation_service.list_videos(
            request=request.to_page_request(self.pagination_settings),
            viewer_id=parse_user_id(request.viewer_id),
            owner_id=UserId(UUID(request.owner_id)) if request.owner_id else None,
            sort_field=request.sort_by,
            sort_direction=request.sort_type,
        )

        logfire.info("Videos listed", count=len(page.items), total=page.total_items)

        return PageResponse[VideoItem].from_page(
            page, [VideoItem.from_view(v) for v in page.items]
        )
