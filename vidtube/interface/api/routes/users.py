"""User routes: a user's posts and subscriptions, and the current user's likes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query

from vidtube.application.usecase.common import (
    ChannelItem,
    PageResponse,
    PostItem,
    VideoItem,
)
from vidtube.application.usecase.post import (
    ListUserPostsRequest,
    ListUserPostsUseCase,
)
from vidtube.application.usecase.subscription import (
    ListSubscribedChannelsRequest,
    ListSubscribedChannelsUseCase,
)
from vidtube.application.usecase.video import (
    ListLikedVideosRequest,
    ListLikedVideosUseCase,
)
from vidtube.domain.service import JWTService
from vidtube.interface.api.auth import require_user_id

router = APIRouter(tags=["users"], route_class=DishkaRoute)


@router.get("/users/{user_id}/posts", response_model=PageResponse[PostItem])
async def list_user_posts(
    user_id: UUID,
    list_user_posts_use_case: FromDishka[ListUserPostsUseCase],
    jwt_service: FromDishka[JWTService],
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
    auth_token: str | None = Cookie(default=None),
) -> PageResponse[PostItem]:
    """List a user's posts, newest first."""
    viewer_id = jwt_service.get_user_id_from_token(auth_token)
    return await list_user_posts_use_case.execute(
        ListUserPostsRequest(
            user_id=str(user_id), page=page, limit=limit, viewer_id=viewer_id
        )
    )


@router.get(
    "/users/by-username/{username}/posts", response_model=PageResponse[PostItem]
)
async def list_posts_by_username(
    username: str,
    list_user_posts_use_case: FromDishka[ListUserPostsUseCase],
    jwt_service: FromDishka[JWTService],
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
    auth_token: str | None = Cookie(default=None),
) -> PageResponse[PostItem]:
    """List the posts of the user with ``username``, newest first."""
    viewer_id = jwt_service.get_user_id_from_token(auth_token)
    return await list_user_posts_use_case.execute(
        ListUserPostsRequest(
            username=username, page=page, limit=limit, viewer_id=viewer_id
        )
    )


@router.get("/users/{user_id}/subscriptions", response_model=PageResponse[ChannelItem])
async def list_subscribed_channels(
    user_id: UUID,
    list_subscribed_channels_use_case: FromDishka[ListSubscribedChannelsUseCase],
    jwt_service: FromDishka[JWTService],
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
    auth_token: str | None = Cookie(default=None),
) -> PageResponse[ChannelItem]:
    """List the channels a user subscribes to, most recent first."""
    viewer_id = jwt_service.get_user_id_from_token(auth_token)
    return await list_subscribed_channels_use_case.execute(
        ListSubscribedChannelsRequest(
            subscriber_id=str(user_id), page=page, limit=limit, viewer_id=viewer_id
        )
    )


@router.get("/me/liked-videos", response_model=PageResponse[VideoItem])
async def list_liked_videos(
    list_liked_videos_use_case: FromDishka[ListLikedVideosUseCase],
    jwt_service: FromDishka[JWTService],
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
    auth_token: str | None = Cookie(default=None),
) -> PageResponse[VideoItem]:
    """List the videos the current user liked, most recently liked first.

    Requires authentication.
    """
    user_id = require_user_id(jwt_service, auth_token, "list liked videos")
    return await list_liked_videos_use_case.execute(
        ListLikedVideosRequest(user_id=user_id, page=page, limit=limit)
    )
