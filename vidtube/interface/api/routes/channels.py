"""Channel routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query

from vidtube.application.usecase.channel import (
    GetChannelProfileRequest,
    GetChannelProfileResponse,
    GetChannelProfileUseCase,
    GetChannelStatsRequest,
    GetChannelStatsResponse,
    GetChannelStatsUseCase,
)
from vidtube.application.usecase.subscription import (
    ListChannelSubscribersRequest,
    ListChannelSubscribersResponse,
    ListChannelSubscribersUseCase,
)
from vidtube.domain.service import JWTService
from vidtube.interface.api.auth import require_user_id

router = APIRouter(prefix="/channels", tags=["channels"], route_class=DishkaRoute)


@router.get("/{channel_id}", response_model=GetChannelProfileResponse)
async def get_channel_profile(
    channel_id: UUID,
    get_channel_profile_use_case: FromDishka[GetChannelProfileUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetChannelProfileResponse:
    """Get a channel's profile with subscriber counts."""
    viewer_id = jwt_service.get_user_id_from_token(auth_token)
    return await get_channel_profile_use_case.execute(
        GetChannelProfileRequest(channel_id=str(channel_id), viewer_id=viewer_id)
    )


@router.get("/{channel_id}/stats", response_model=GetChannelStatsResponse)
async def get_channel_stats(
    channel_id: UUID,
    get_channel_stats_use_case: FromDishka[GetChannelStatsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetChannelStatsResponse:
    """Get dashboard totals for a channel.

    Requires authentication as the channel owner.
    """
    user_id = require_user_id(jwt_service, auth_token, "view channel stats")
    return await get_channel_stats_use_case.execute(
        GetChannelStatsRequest(channel_id=str(channel_id), user_id=user_id)
    )


@router.get("/{channel_id}/subscribers", response_model=ListChannelSubscribersResponse)
async def list_channel_subscribers(
    channel_id: UUID,
    list_channel_subscribers_use_case: FromDishka[ListChannelSubscribersUseCase],
    jwt_service: FromDishka[JWTService],
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
    auth_token: str | None = Cookie(default=None),
) -> ListChannelSubscribersResponse:
    """List a channel's subscribers with the total subscriber count."""
    viewer_id = jwt_service.get_user_id_from_token(auth_token)
    return await list_channel_subscribers_use_case.execute(
        ListChannelSubscribersRequest(
            channel_id=str(channel_id), page=page, limit=limit, viewer_id=viewer_id
        )
    )
