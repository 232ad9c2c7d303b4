"""Video repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence
from uuid import UUID

from vidtube.domain.model.video import Video
from vidtube.domain.value import SortDirection, UserId, VideoId, VideoSortField


class VideoRepository(ABC):
    """Repository for Video entity.

    Defines the contract for video persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, video_id: VideoId) -> Optional[Video]:
        """Find a video by ID.

        Args:
            video_id: The video's unique identifier

        Returns:
            The video if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, video_ids: Sequence[VideoId]) -> dict[VideoId, Video]:
        """Find many videos at once (batch query).

        Returns:
            Mapping of ID to video for the IDs that exist
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        owner_id: Optional[UserId] = None,
        published_only: bool = True,
        sort_field: VideoSortField = VideoSortField.CREATED_AT,
        sort_direction: SortDirection = SortDirection.DESC,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Video]:
        """Find videos with filtering, sorting and pagination.

        Ties on the sort field are broken by ID ascending so that pages are
        stable across repeated queries.

        Args:
            owner_id: Only videos owned by this user (None for all owners)
            published_only: Exclude unpublished videos
            sort_field: Field to sort by
            sort_direction: Sort direction for ``sort_field``
            limit: Maximum number of videos to return
            offset: Number of videos to skip

        Returns:
            List of videos matching the criteria
        """
        pass

    @abstractmethod
    async def count(
        self, owner_id: Optional[UserId] = None, published_only: bool = True
    ) -> int:
        """Count videos matching the same filters as ``find_all``."""
        pass

    @abstractmethod
    async def find_ids_by_owner(self, owner_id: UserId) -> list[VideoId]:
        """Find the IDs of every video a user owns, published or not."""
        pass

    @abstractmethod
    async def sum_views_by_owner(self, owner_id: UserId) -> int:
        """Total view count across a user's videos."""
        pass

    @abstractmethod
    async def find_existing_ids(self, ids: Sequence[UUID]) -> set[UUID]:
        """Return the subset of ``ids`` that still exist."""
        pass

    @abstractmethod
    async def save(self, video: Video) -> Video:
        """Save a video (create or update)."""
        pass

    @abstractmethod
    async def delete(self, video_id: VideoId) -> bool:
        """Delete a video (hard delete).

        Dependent comments and reactions are the cascade's job.

        Returns:
            True if the video was deleted, False if it did not exist
        """
        pass
