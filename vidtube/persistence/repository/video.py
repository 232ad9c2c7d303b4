"""PostgreSQL implementation of Video repository."""

from typing import Optional, Sequence
from uuid import UUID

import logfire
from sqlalchemy import asc, delete, desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from vidtube.domain.model import Video
from vidtube.domain.repository import VideoRepository
from vidtube.domain.value import SortDirection, UserId, VideoId, VideoSortField
from vidtube.persistence.mappers import row_to_video, video_to_dict
from vidtube.persistence.tables import videos_table

SORT_COLUMNS = {
    VideoSortField.CREATED_AT: videos_table.c.created_at,
    VideoSortField.TITLE: videos_table.c.title,
    VideoSortField.VIEWS: videos_table.c.views,
    VideoSortField.DURATION: videos_table.c.duration,
}


class PostgresVideoRepository(VideoRepository):
    """PostgreSQL implementation of VideoRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _filtered(self, stmt, owner_id: Optional[UserId], published_only: bool):
        if owner_id is not None:
            stmt = stmt.where(videos_table.c.owner_id == owner_id)
        if published_only:
            stmt = stmt.where(videos_table.c.is_published.is_(True))
        return stmt

    async def find_by_id(self, video_id: VideoId) -> Optional[Video]:
        """Find a video by ID."""
        with logfire.span("video_repository.find_by_id", video_id=str(video_id)):
            stmt = select(videos_table).where(videos_table.c.id == video_id)
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            return row_to_video(dict(row)) if row else None

    async def find_by_ids(self, video_ids: Sequence[VideoId]) -> dict[VideoId, Video]:
        """Find many videos in a single query."""
        if not video_ids:
            return {}

        with logfire.span("video_repository.find_by_ids", count=len(video_ids)):
            stmt = select(videos_table).where(videos_table.c.id.in_(set(video_ids)))
            result = await self.session.execute(stmt)
            videos = [row_to_video(dict(row)) for row in result.mappings().all()]
            return {video.id: video for video in videos}

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
        with logfire.span(
            "video_repository.find_all",
            owner_id=str(owner_id) if owner_id else None,
            published_only=published_only,
            sort_field=sort_field.value,
            sort_direction=sort_direction.value,
            limit=limit,
            offset=offset,
        ):
            stmt = self._filtered(select(videos_table), owner_id, published_only)

            column = SORT_COLUMNS[sort_field]
            order = desc if sort_direction == SortDirection.DESC else asc
            # ID breaks ties so offsets stay stable
            stmt = stmt.order_by(order(column), asc(videos_table.c.id))
            stmt = stmt.limit(limit).offset(offset)

            result = await self.session.execute(stmt)
            videos = [row_to_video(dict(row)) for row in result.mappings().all()]

            logfire.info("Found videos", count=len(videos))
            return videos

    async def count(
        self, owner_id: Optional[UserId] = None, published_only: bool = True
    ) -> int:
        """Count videos matching the same filters as ``find_all``."""
        stmt = self._filtered(
            select(func.count()).select_from(videos_table), owner_id, published_only
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_ids_by_owner(self, owner_id: UserId) -> list[VideoId]:
        """Find the IDs of every video a user owns."""
        stmt = select(videos_table.c.id).where(videos_table.c.owner_id == owner_id)
        result = await self.session.execute(stmt)
        return [VideoId(row.id) for row in result.all()]

    async def sum_views_by_owner(self, owner_id: UserId) -> int:
        """Total view count across a user's videos."""
        stmt = select(func.coalesce(func.sum(videos_table.c.views), 0)).where(
            videos_table.c.owner_id == owner_id
        )
        result = await self.session.execute(stmt)
        return int(result.scalar() or 0)

    async def find_existing_ids(self, ids: Sequence[UUID]) -> set[UUID]:
        """Return the subset of ``ids`` that still exist."""
        if not ids:
            return set()

        stmt = select(videos_table.c.id).where(videos_table.c.id.in_(set(ids)))
        result = await self.session.execute(stmt)
        return {row.id for row in result.all()}

    async def save(self, video: Video) -> Video:
        """Save a video (create or update)."""
        with logfire.span("video_repository.save", video_id=str(video.id)):
            existing = await self.find_by_id(video.id)
            video_dict = video_to_dict(video)

            if existing:
                stmt = (
                    videos_table.update()
                    .where(videos_table.c.id == video.id)
                    .values(**video_dict)
                )
            else:
                stmt = videos_table.insert().values(**video_dict)

            await self.session.execute(stmt)
            await self.session.flush()
            return video

    async def delete(self, video_id: VideoId) -> bool:
        """Delete a video (hard delete)."""
        with logfire.span("video_repository.delete", video_id=str(video_id)):
            stmt = delete(videos_table).where(videos_table.c.id == video_id)
            result = await self.session.execute(stmt)
            await self.session.flush()
            return result.rowcount > 0  # type: ignore[attr-defined]
