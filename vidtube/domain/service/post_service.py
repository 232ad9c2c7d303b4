"""Post domain service."""

import logfire

from vidtube.domain.error import NotAuthorizedError, NotFoundError
from vidtube.domain.model.post import Post
from vidtube.domain.repository import PostRepository
from vidtube.domain.value import PostId, UserId

from .base import Service


class PostService(Service):
    """Domain service for post lookups and deletion."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def get_by_id(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Raises:
            NotFoundError: If post not found
        """
        with logfire.span("post_service.get_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))
            return post

    async def delete_owned(self, post_id: PostId, actor_id: UserId) -> Post:
        """Delete a post owned by ``actor_id``.

        Raises:
            NotFoundError: If post not found
            NotAuthorizedError: If the actor does not own the post
        """
        with logfire.span(
            "post_service.delete_owned", post_id=str(post_id), actor_id=str(actor_id)
        ):
            post = await self.get_by_id(post_id)
            if post.owner_id != actor_id:
                logfire.warn(
                    "Post delete by non-owner",
                    post_id=str(post_id),
                    actor_id=str(actor_id),
                )
                raise NotAuthorizedError("post", str(post_id), str(actor_id), "delete")

            if not await self.post_repository.delete(post_id):
                raise NotFoundError("Post", str(post_id))

            logfire.info("Post deleted", post_id=str(post_id))
            return post
