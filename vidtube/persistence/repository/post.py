"""PostgreSQL implementation of Post repository."""

from typing import Optional, Sequence
from uuid import UUID

import logfire
from sqlalchemy import asc, delete, desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from vidtube.domain.model import Post
from vidtube.domain.repository import PostRepository
from vidtube.domain.value import PostId, UserId
from vidtube.persistence.mappers import post_to_dict, row_to_post
from vidtube.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            return row_to_post(dict(row)) if row else None

    async def find_by_owner(
        self, owner_id: UserId, limit: int = 10, offset: int = 0
    ) -> list[Post]:
        """Find posts by a user, newest first."""
        with logfire.span(
            "post_repository.find_by_owner",
            owner_id=str(owner_id),
            limit=limit,
            offset=offset,
        ):
            stmt = (
                select(posts_table)
                .where(posts_table.c.owner_id == owner_id)
                .order_by(desc(posts_table.c.created_at), asc(posts_table.c.id))
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            return [row_to_post(dict(row)) for row in result.mappings().all()]

    async def count_by_owner(self, owner_id: UserId) -> int:
        """Count posts by a user."""
        stmt = (
            select(func.count())
            .select_from(posts_table)
            .where(posts_table.c.owner_id == owner_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_existing_ids(self, ids: Sequence[UUID]) -> set[UUID]:
        """Return the subset of ``ids`` that still exist."""
        if not ids:
            return set()

        stmt = select(posts_table.c.id).where(posts_table.c.id.in_(set(ids)))
        result = await self.session.execute(stmt)
        return {row.id for row in result.all()}

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        existing = await self.find_by_id(post.id)
        post_dict = post_to_dict(post)

        if existing:
            stmt = (
                posts_table.update()
                .where(posts_table.c.id == post.id)
                .values(**post_dict)
            )
        else:
            stmt = posts_table.insert().values(**post_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return post

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post."""
        with logfire.span("post_repository.delete", post_id=str(post_id)):
            stmt = delete(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            await self.session.flush()
            return result.rowcount > 0  # type: ignore[attr-defined]
