"""In-memory video repository for testing."""

from typing import Optional, Sequence
from uuid import UUID

from vidtube.domain.model.video import Video
from vidtube.domain.repository.video import VideoRepository
from vidtube.domain.value import SortDirection, UserId, VideoId, VideoSortField

from ._ordering import sort_stable

SORT_KEYS = {
    VideoSortField.CREATED_AT: lambda v: v.created_at,
    VideoSortField.TITLE: lambda v: v.title,
    VideoSortField.VIEWS: lambda v: v.views,
    VideoSortField.DURATION: lambda v: v.duration,
}


class InMemoryVideoRepository(VideoRepository):
    """In-memory implementation of VideoRepository for testing."""

    def __init__(self) -> None:
        self._videos: dict[VideoId, Video] = {}

    def _filtered(self, owner_id: Optional[UserId], published_only: bool) -> list[Video]:
        videos = list(self._videos.values())
        if owner_id is not None:
            videos = [v for v in videos if v.owner_id == owner_id]
        if published_only:
            videos = [v for v in videos if v.is_published]
        return videos

    async def find_by_id(self, video_id: VideoId) -> Optional[Video]:
        """Find a video by ID."""
        return self._videos.get(video_id)

    async def find_by_ids(self, video_ids: Sequence[VideoId]) -> dict[VideoId, Video]:
        """Find many videos at once."""
        return {vid: self._videos[vid] for vid in video_ids if vid in self._videos}

    async def find_all(
        self,
        owner_id: Optional[UserId] = None,
        published_only: bool = True,
        sort_field: VideoSortField = VideoSortField.CREATED_AT,
        sort_direction: SortDirection = SortDirection.DESC,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Video]:
        """Find videos with filtering, sorting and pagination."""
        videos = sort_stable(
            self._filtered(owner_id, published_only),
            key=SORT_KEYS[sort_field],
            descending=sort_direction == SortDirection.DESC,
        )
        return videos[offset : offset + limit]

    async def count(
        self, owner_id: Optional[UserId] = None, published_only: bool = True
    ) -> int:
        """Count videos matching the filters."""
        return len(self._filtered(owner_id, published_only))

    async def find_ids_by_owner(self, owner_id: UserId) -> list[VideoId]:
        """Find the IDs of every video a user owns."""
        return [v.id for v in self._videos.values() if v.owner_id == owner_id]

    async def sum_views_by_owner(self, owner_id: UserId) -> int:
        """Total view count across a user's videos."""
        return sum(v.views for v in self._videos.values() if v.owner_id == owner_id)

    async def find_existing_ids(self, ids: Sequence[UUID]) -> set[UUID]:
        """Return the subset of ``ids`` that still exist."""
        return {i for i in ids if i in self._videos}

    async def save(self, video: Video) -> Video:
        """Save a video."""
        self._videos[video.id] = video
        return video

    async def delete(self, video_id: VideoId) -> bool:
        """Delete a video."""
        return self._videos.pop(video_id, None) is not None
