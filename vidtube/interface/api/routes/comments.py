"""Comment routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from vidtube.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from vidtube.domain.service import JWTService
from vidtube.interface.api.auth import require_user_id

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


@router.delete("/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: UUID,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    """Delete a comment along with its likes.

    Requires authentication. Only the author may delete a comment.
    """
    user_id = require_user_id(jwt_service, auth_token, "delete comments")
    return await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=str(comment_id), user_id=user_id)
    )
