"""PostgreSQL implementation of Comment repository."""

from typing import Optional, Sequence
from uuid import UUID

import logfire
from sqlalchemy import asc, delete, desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from vidtube.domain.model import Comment
from vidtube.domain.repository import CommentRepository
from vidtube.domain.value import CommentId, VideoId
from vidtube.persistence.mappers import comment_to_dict, row_to_comment
from vidtube.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        with logfire.span("comment_repository.find_by_id", comment_id=str(comment_id)):
            stmt = select(comments_table).where(comments_table.c.id == comment_id)
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            return row_to_comment(dict(row)) if row else None

    async def find_by_video(
        self, video_id: VideoId, limit: int = 10, offset: int = 0
    ) -> list[Comment]:
        """Find comments on a video, newest first."""
        with logfire.span(
            "comment_repository.find_by_video",
            video_id=str(video_id),
            limit=limit,
            offset=offset,
        ):
            stmt = (
                select(comments_table)
                .where(comments_table.c.video_id == video_id)
                .order_by(desc(comments_table.c.created_at), asc(comments_table.c.id))
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def count_by_video(self, video_id: VideoId) -> int:
        """Count comments on a video."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.video_id == video_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_ids_by_video(self, video_id: VideoId) -> list[CommentId]:
        """Find the IDs of every comment on a video."""
        stmt = select(comments_table.c.id).where(comments_table.c.video_id == video_id)
        result = await self.session.execute(stmt)
        return [CommentId(row.id) for row in result.all()]

    async def find_video_ids(self) -> set[VideoId]:
        """Return every video ID that at least one comment points at."""
        stmt = select(comments_table.c.video_id).distinct()
        result = await self.session.execute(stmt)
        return {VideoId(row.video_id) for row in result.all()}

    async def find_existing_ids(self, ids: Sequence[UUID]) -> set[UUID]:
        """Return the subset of ``ids`` that still exist."""
        if not ids:
            return set()

        stmt = select(comments_table.c.id).where(comments_table.c.id.in_(set(ids)))
        result = await self.session.execute(stmt)
        return {row.id for row in result.all()}

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        existing = await self.find_by_id(comment.id)
        comment_dict = comment_to_dict(comment)

        if existing:
            stmt = (
                comments_table.update()
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = comments_table.insert().values(**comment_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment."""
        with logfire.span("comment_repository.delete", comment_id=str(comment_id)):
            stmt = delete(comments_table).where(comments_table.c.id == comment_id)
            result = await self.session.execute(stmt)
            await self.session.flush()
            return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_ids(self, comment_ids: Sequence[CommentId]) -> int:
        """Delete many comments in a single statement."""
        if not comment_ids:
            return 0

        with logfire.span("comment_repository.delete_by_ids", count=len(comment_ids)):
            stmt = delete(comments_table).where(
                comments_table.c.id.in_(set(comment_ids))
            )
            result = await self.session.execute(stmt)
            await self.session.flush()
            return result.rowcount  # type: ignore[attr-defined]
