"""List video comments use case."""

from typing import Optional
from uuid import UUID

from vidtube.application.usecase.base import BaseUseCase
from vidtube.application.usecase.common import (
    CommentItem,
    PageQuery,
    PageResponse,
    parse_user_id,
)
from vidtube.config import PaginationSettings
from vidtube.domain.service import AggregationService
from vidtube.domain.value import VideoId


class ListVideoCommentsRequest(PageQuery):
    """List video comments request."""

    video_id: str
    viewer_id: Optional[str] = None  # Current user ID (if authenticated)


class ListVideoCommentsUseCase(BaseUseCase):
    """Use case for listing the comments on a video."""

    def __init__(
        self,
        aggregation_service: AggregationService,
        pagination_settings: PaginationSettings,
    ) -> None:
        """Initialize list video comments use case.

        Args:
            aggregation_service: Aggregation domain service
            pagination_settings: Pagination limits
        """
        self.aggregation_service = aggregation_service
        self.pagination_settings = pagination_settings

    async def execute(
        self, request: ListVideoCommentsRequest
    ) -> PageResponse[CommentItem]:
        """Execute list video comments flow.

        Raises:
            NotFoundError: If the video does not exist
        """
        page = await self.aggregation_service.list_video_comments(
            video_id=VideoId(UUID(request.video_id)),
            request=request.to_page_request(self.pagination_settings),
            viewer_id=parse_user_id(request.viewer_id),
        )
        return PageResponse[CommentItem].from_page(
            page, [CommentItem.from_view(v) for v in page.items]
        )
