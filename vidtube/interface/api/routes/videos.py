"""Video routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query

from vidtube.application.usecase.comment import (
    ListVideoCommentsRequest,
    ListVideoCommentsUseCase,
)
from vidtube.application.usecase.common import CommentItem, PageResponse, VideoItem
from vidtube.application.usecase.video import (
    DeleteVideoRequest,
    DeleteVideoResponse,
    DeleteVideoUseCase,
    GetVideoRequest,
    GetVideoUseCase,
    ListVideosRequest,
    ListVideosUseCase,
)
from vidtube.domain.service import JWTService
from vidtube.domain.value import SortDirection, VideoSortField
from vidtube.interface.api.auth import require_user_id

router = APIRouter(prefix="/videos", tags=["videos"], route_class=DishkaRoute)


@router.get("", response_model=PageResponse[VideoItem])
async def list_videos(
    list_videos_use_case: FromDishka[ListVideosUseCase],
    jwt_service: FromDishka[JWTService],
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
    sort_by: VideoSortField = Query(default=VideoSortField.CREATED_AT, alias="sortBy"),
    sort_type: SortDirection = Query(default=SortDirection.DESC, alias="sortType"),
    owner: UUID | None = Query(default=None),
    auth_token: str | None = Cookie(default=None),
) -> PageResponse[VideoItem]:
    """List videos with sorting and pagination.

    Authentication is optional; when present, each video carries the
    viewer's like flag and the viewer's own unpublished videos are listed
    under ``owner``.

    Args:
        list_videos_use_case: List videos use case from DI
        jwt_service: JWT service for optional authentication
        page: 1-based page number
        limit: Page size, clamped to the configured maximum
        sort_by: Sort field
        sort_type: Sort direction
        owner: Only this channel's videos
        auth_token: JWT token from cookie (optional)

    Returns:
        Page of videos
    """
    viewer_id = jwt_service.get_user_id_from_token(auth_token)

    return await list_videos_use_case.execute(
        ListVideosRequest(
            page=page,
            limit=limit,
            sort_by=sort_by,
            sort_type=sort_type,
            owner_id=str(owner) if owner else None,
            viewer_id=viewer_id,
        )
    )


@router.get("/{video_id}", response_model=VideoItem)
async def get_video(
    video_id: UUID,
    get_video_use_case: FromDishka[GetVideoUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> VideoItem:
    """Get a single video with its like count.

    Unpublished videos are only visible to their owner.
    """
    viewer_id = jwt_service.get_user_id_from_token(auth_token)
    return await get_video_use_case.execute(
        GetVideoRequest(video_id=str(video_id), viewer_id=viewer_id)
    )


@router.delete("/{video_id}", response_model=DeleteVideoResponse)
async def delete_video(
    video_id: UUID,
    delete_video_use_case: FromDishka[DeleteVideoUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteVideoResponse:
    """Delete a video along with its comments and likes.

    Requires authentication. Only the owner may delete a video.
    """
    user_id = require_user_id(jwt_service, auth_token, "delete videos")
    return await delete_video_use_case.execute(
        DeleteVideoRequest(video_id=str(video_id), user_id=user_id)
    )


@router.get("/{video_id}/comments", response_model=PageResponse[CommentItem])
async def list_video_comments(
    video_id: UUID,
    list_video_comments_use_case: FromDishka[ListVideoCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
    auth_token: str | None = Cookie(default=None),
) -> PageResponse[CommentItem]:
    """List the comments on a video, newest first."""
    viewer_id = jwt_service.get_user_id_from_token(auth_token)
    return await list_video_comments_use_case.execute(
        ListVideoCommentsRequest(
            video_id=str(video_id), page=page, limit=limit, viewer_id=viewer_id
        )
    )
