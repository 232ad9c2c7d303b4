"""Subscription routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Response, status

from vidtube.application.usecase.subscription import (
    ToggleSubscriptionRequest,
    ToggleSubscriptionResponse,
    ToggleSubscriptionUseCase,
)
from vidtube.domain.service import JWTService
from vidtube.domain.value import ToggleState
from vidtube.interface.api.auth import require_user_id

router = APIRouter(
    prefix="/subscriptions", tags=["subscriptions"], route_class=DishkaRoute
)


@router.post("/{channel_id}", response_model=ToggleSubscriptionResponse)
async def toggle_subscription(
    channel_id: UUID,
    response: Response,
    toggle_subscription_use_case: FromDishka[ToggleSubscriptionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ToggleSubscriptionResponse:
    """Subscribe to a channel, or unsubscribe if already subscribed.

    Requires authentication. Responds 201 when subscribed and 200 when
    unsubscribed.
    """
    user_id = require_user_id(jwt_service, auth_token, "subscribe")

    result = await toggle_subscription_use_case.execute(
        ToggleSubscriptionRequest(subscriber_id=user_id, channel_id=str(channel_id))
    )

    response.status_code = (
        status.HTTP_201_CREATED
        if result.state == ToggleState.ADDED
        else status.HTTP_200_OK
    )
    return result
