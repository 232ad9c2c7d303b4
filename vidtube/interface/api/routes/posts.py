"""Post routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from vidtube.application.usecase.post import (
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
)
from vidtube.domain.service import JWTService
from vidtube.interface.api.auth import require_user_id

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


@router.delete("/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: UUID,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeletePostResponse:
    """Delete a post along with its likes.

    Requires authentication. Only the author may delete a post.
    """
    user_id = require_user_id(jwt_service, auth_token, "delete posts")
    return await delete_post_use_case.execute(
        DeletePostRequest(post_id=str(post_id), user_id=user_id)
    )
