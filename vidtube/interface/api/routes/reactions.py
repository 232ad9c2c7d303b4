"""Reaction routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Response, status

from vidtube.application.usecase.reaction import (
    ToggleReactionRequest,
    ToggleReactionResponse,
    ToggleReactionUseCase,
)
from vidtube.domain.service import JWTService
from vidtube.domain.value import ToggleState
from vidtube.interface.api.auth import require_user_id

router = APIRouter(prefix="/reactions", tags=["reactions"], route_class=DishkaRoute)


@router.post("/{kind}/{target_id}", response_model=ToggleReactionResponse)
async def toggle_reaction(
    kind: str,
    target_id: UUID,
    response: Response,
    toggle_reaction_use_case: FromDishka[ToggleReactionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ToggleReactionResponse:
    """Like or unlike a video, comment or post.

    Requires authentication. Responds 201 when the like was added and 200
    when it was removed.

    Args:
        kind: Target kind: ``video``, ``comment`` or ``post``
        target_id: Target UUID
        response: Outgoing response, for the status code
        toggle_reaction_use_case: Toggle reaction use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        New reaction state
    """
    user_id = require_user_id(jwt_service, auth_token, "like content")

    result = await toggle_reaction_use_case.execute(
        ToggleReactionRequest(
            actor_id=user_id, target_kind=kind, target_id=str(target_id)
        )
    )

    response.status_code = (
        status.HTTP_201_CREATED
        if result.state == ToggleState.ADDED
        else status.HTTP_200_OK
    )
    return result
