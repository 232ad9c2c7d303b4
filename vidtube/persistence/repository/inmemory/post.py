"""In-memory post repository for testing."""

from typing import Optional, Sequence
from uuid import UUID

from vidtube.domain.model.post import Post
from vidtube.domain.repository.post import PostRepository
from vidtube.domain.value import PostId, UserId

from ._ordering import newest_first


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    def _by_owner(self, owner_id: UserId) -> list[Post]:
        return [p for p in self._posts.values() if p.owner_id == owner_id]

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_by_owner(
        self, owner_id: UserId, limit: int = 10, offset: int = 0
    ) -> list[Post]:
        """Find posts by a user, newest first."""
        return newest_first(self._by_owner(owner_id))[offset : offset + limit]

    async def count_by_owner(self, owner_id: UserId) -> int:
        """Count posts by a user."""
        return len(self._by_owner(owner_id))

    async def find_existing_ids(self, ids: Sequence[UUID]) -> set[UUID]:
        """Return the subset of ``ids`` that still exist."""
        return {i for i in ids if i in self._posts}

    async def save(self, post: Post) -> Post:
        """Save a post."""
        self._posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post."""
        return self._posts.pop(post_id, None) is not None
