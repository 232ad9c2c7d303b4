"""List user posts use case."""

from typing import Optional
from uuid import UUID

from pydantic import model_validator

from vidtube.application.usecase.base import BaseUseCase
from vidtube.application.usecase.common import (
    PageQuery,
    PageResponse,
    PostItem,
    parse_user_id,
)
from vidtube.config import PaginationSettings
from vidtube.domain.service import AggregationService, UserService
from vidtube.domain.value import UserId


class ListUserPostsRequest(PageQuery):
    """List user posts request.

    The author is named either by ``user_id`` or by ``username``.
    """

    user_id: Optional[str] = None
    username: Optional[str] = None
    viewer_id: Optional[str] = None  # Current user ID (if authenticated)

    @model_validator(mode="after")
    def require_one_author_reference(self) -> "ListUserPostsRequest":
        if (self.user_id is None) == (self.username is None):
            raise ValueError("Exactly one of user_id or username is required")
        return self


class ListUserPostsUseCase(BaseUseCase):
    """Use case for listing a user's posts."""

    def __init__(
        self,
        aggregation_service: AggregationService,
        user_service: UserService,
        pagination_settings: PaginationSettings,
    ) -> None:
        """Initialize list user posts use case.

        Args:
            aggregation_service: Aggregation domain service
            user_service: Resolves usernames to users
            pagination_settings: Pagination limits
        """
        self.aggregation_service = aggregation_service
        self.user_service = user_service
        self.pagination_settings = pagination_settings

    async def execute(self, request: ListUserPostsRequest) -> PageResponse[PostItem]:
        """Execute list user posts flow.

        Raises:
            NotFoundError: If the user does not exist
        """
        if request.username is not None:
            author = await self.user_service.get_by_username(request.username)
            user_id = author.id
        else:
            user_id = UserId(UUID(request.user_id))

        page = await self.aggregation_service.list_user_posts(
            user_id=user_id,
            request=request.to_page_request(self.pagination_settings),
            viewer_id=parse_user_id(request.viewer_id),
        )
        return PageResponse[PostItem].from_page(
            page, [PostItem.from_view(v) for v in page.items]
        )
