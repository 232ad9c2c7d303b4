"""Reaction domain service."""

from datetime import datetime
from uuid import UUID, uuid4

import logfire

from vidtube.domain.error import ValidationError
from vidtube.domain.model import Reaction, ToggleResult
from vidtube.domain.repository import ReactionRepository
from vidtube.domain.value import (
    CommentId,
    PostId,
    ReactionId,
    ReactionKey,
    ReactionTargetKind,
    UserId,
    VideoId,
)

from .base import Service
from .comment_service import CommentService
from .post_service import PostService
from .toggle import toggle_edge
from .user_service import UserService
from .video_service import VideoService


class ReactionService(Service):
    """Domain service for liking and unliking content."""

    def __init__(
        self,
        reaction_repository: ReactionRepository,
        user_service: UserService,
        video_service: VideoService,
        comment_service: CommentService,
        post_service: PostService,
    ) -> None:
        """Initialize reaction service.

        Args:
            reaction_repository: Reaction edge store
            user_service: User domain service
            video_service: Video domain service
            comment_service: Comment domain service
            post_service: Post domain service
        """
        self.reaction_repository = reaction_repository
        self.user_service = user_service
        self.video_service = video_service
        self.comment_service = comment_service
        self.post_service = post_service

    async def toggle(
        self, actor_id: UserId, target_kind: ReactionTargetKind, target_id: UUID
    ) -> ToggleResult[Reaction]:
        """Like the target if the actor has not, otherwise unlike it.

        Any user may react to any target, their own content included.

        Args:
            actor_id: User reacting
            target_kind: Kind of the target
            target_id: ID of the target

        Returns:
            Whether the reaction is now present, with the affected edge

        Raises:
            NotFoundError: If the actor or the target does not exist
            ValidationError: If the target kind is not supported
        """
        with logfire.span(
            "reaction_service.toggle",
            actor_id=str(actor_id),
            target_kind=target_kind.value,
            target_id=str(target_id),
        ):
            await self.user_service.get_by_id(actor_id)
            await self.ensure_target_exists(target_kind, target_id)

            key = ReactionKey(
                actor_id=actor_id, target_kind=target_kind, target_id=target_id
            )
            result = await toggle_edge(
                self.reaction_repository,
                key,
                lambda: Reaction(
                    id=ReactionId(uuid4()),
                    actor_id=actor_id,
                    target_kind=target_kind,
                    target_id=target_id,
                    created_at=datetime.now(),
                ),
            )

            logfire.info(
                "Reaction toggled",
                actor_id=str(actor_id),
                target_kind=target_kind.value,
                target_id=str(target_id),
                state=result.state.value,
            )
            return result

    async def ensure_target_exists(
        self, target_kind: ReactionTargetKind, target_id: UUID
    ) -> None:
        """Raise NotFoundError unless the target entity exists."""
        if target_kind == ReactionTargetKind.VIDEO:
            await self.video_service.get_by_id(VideoId(target_id))
        elif target_kind == ReactionTargetKind.COMMENT:
            await self.comment_service.get_by_id(CommentId(target_id))
        elif target_kind == ReactionTargetKind.POST:
            await self.post_service.get_by_id(PostId(target_id))
        else:
            raise ValidationError(f"Unsupported reaction target: {target_kind}")
