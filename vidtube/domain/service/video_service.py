"""Video domain service."""

import logfire

from vidtube.domain.error import NotAuthorizedError, NotFoundError
from vidtube.domain.model.video import Video
from vidtube.domain.repository import VideoRepository
from vidtube.domain.value import UserId, VideoId

from .base import Service


class VideoService(Service):
    """Domain service for video lookups and deletion."""

    def __init__(self, video_repository: VideoRepository) -> None:
        """Initialize video service.

        Args:
            video_repository: Video repository
        """
        self.video_repository = video_repository

    async def get_by_id(self, video_id: VideoId) -> Video:
        """Get a video by ID.

        Args:
            video_id: Video ID

        Returns:
            Video entity

        Raises:
            NotFoundError: If video not found
        """
        with logfire.span("video_service.get_by_id", video_id=str(video_id)):
            video = await self.video_repository.find_by_id(video_id)
            if not video:
                logfire.warn("Video not found", video_id=str(video_id))
                raise NotFoundError("Video", str(video_id))
            return video

    async def delete_owned(self, video_id: VideoId, actor_id: UserId) -> Video:
        """Delete a video owned by ``actor_id``.

        Only the video record is removed. Comments and reactions are left
        for the cascade coordinator.

        Args:
            video_id: Video ID
            actor_id: User requesting the deletion

        Returns:
            The deleted video

        Raises:
            NotFoundError: If video not found
            NotAuthorizedError: If the actor does not own the video
        """
        with logfire.span(
            "video_service.delete_owned",
            video_id=str(video_id),
            actor_id=str(actor_id),
        ):
            video = await self.get_by_id(video_id)
            if video.owner_id != actor_id:
                logfire.warn(
                    "Video delete by non-owner",
                    video_id=str(video_id),
                    actor_id=str(actor_id),
                )
                raise NotAuthorizedError("video", str(video_id), str(actor_id), "delete")

            if not await self.video_repository.delete(video_id):
                # Deleted by a concurrent request after the lookup
                raise NotFoundError("Video", str(video_id))

            logfire.info("Video deleted", video_id=str(video_id))
            return video
