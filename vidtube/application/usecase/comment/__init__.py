"""Comment use cases."""

from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .list_video_comments import ListVideoCommentsRequest, ListVideoCommentsUseCase

__all__ = [
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "ListVideoCommentsRequest",
    "ListVideoCommentsUseCase",
]
