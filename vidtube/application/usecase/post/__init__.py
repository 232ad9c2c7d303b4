"""Post use cases."""

from .delete_post import DeletePostRequest, DeletePostResponse, DeletePostUseCase
from .list_user_posts import ListUserPostsRequest, ListUserPostsUseCase

__all__ = [
    "DeletePostRequest",
    "DeletePostResponse",
    "DeletePostUseCase",
    "ListUserPostsRequest",
    "ListUserPostsUseCase",
]
