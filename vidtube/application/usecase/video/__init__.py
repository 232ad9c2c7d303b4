"""Video use cases."""

from .delete_video import DeleteVideoRequest, DeleteVideoResponse, DeleteVideoUseCase
from .get_video import GetVideoRequest, GetVideoUseCase
from .list_liked_videos import ListLikedVideosRequest, ListLikedVideosUseCase
from .list_videos import ListVideosRequest, ListVideosUseCase

__all__ = [
    "DeleteVideoRequest",
    "DeleteVideoResponse",
    "DeleteVideoUseCase",
    "GetVideoRequest",
    "GetVideoUseCase",
    "ListLikedVideosRequest",
    "ListLikedVideosUseCase",
    "ListVideosRequest",
    "ListVideosUseCase",
]
