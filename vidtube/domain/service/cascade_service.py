"""Cascade coordinator.

Reactions and comments reference their parents by ID only. There are no
foreign keys between the stores, so deleting a parent leaves dependents
behind unless this coordinator removes them.
"""

from uuid import UUID

import logfire

from vidtube.domain.error import CascadeIncompleteError
from vidtube.domain.model import CascadeReport
from vidtube.domain.repository import (
    CommentRepository,
    PostRepository,
    ReactionRepository,
    VideoRepository,
)
from vidtube.domain.value import ReactionTargetKind, StoreConsistency, VideoId

from .base import Service


class CascadeService(Service):
    """Removes edges and entities that depend on a deleted parent."""

    def __init__(
        self,
        reaction_repository: ReactionRepository,
        comment_repository: CommentRepository,
        video_repository: VideoRepository,
        post_repository: PostRepository,
        consistency: StoreConsistency = StoreConsistency.BEST_EFFORT,
    ) -> None:
        """Initialize cascade service.

        Args:
            reaction_repository: Reaction edge store
            comment_repository: Comment repository
            video_repository: Video repository (orphan sweep)
            post_repository: Post repository (orphan sweep)
            consistency: Whether a failed request undoes the parent delete
        """
        self.reaction_repository = reaction_repository
        self.comment_repository = comment_repository
        self.video_repository = video_repository
        self.post_repository = post_repository
        self.consistency = consistency

    async def on_entity_deleted(
        self, kind: ReactionTargetKind, entity_id: UUID
    ) -> CascadeReport:
        """Remove everything that depended on a just-deleted entity.

        For a video this removes its comments, the reactions on those
        comments, and the reactions on the video itself, in that order so a
        failure partway through never loses the comment IDs needed to
        finish. For a comment or a post only its reactions are removed.

        Args:
            kind: Kind of the deleted entity
            entity_id: ID of the deleted entity

        Returns:
            Counts of removed reactions and comments

        Raises:
            CascadeIncompleteError: If cleanup failed; the cause is chained
        """
        with logfire.span(
            "cascade.on_entity_deleted", kind=kind.value, entity_id=str(entity_id)
        ):
            try:
                if kind == ReactionTargetKind.VIDEO:
                    report = await self._cascade_video(VideoId(entity_id))
                else:
                    removed = await self.reaction_repository.delete_all_by_target(
                        kind, entity_id
                    )
                    report = CascadeReport(reactions_removed=removed)
            except Exception as e:
                logfire.error(
                    "Cascade incomplete",
                    kind=kind.value,
                    entity_id=str(entity_id),
                    error=str(e),
                )
                raise CascadeIncompleteError(
                    kind.value,
                    str(entity_id),
                    rolled_back=self.consistency == StoreConsistency.TRANSACTIONAL,
                ) from e

            logfire.info(
                "Cascade complete",
                kind=kind.value,
                entity_id=str(entity_id),
                reactions_removed=report.reactions_removed,
                comments_removed=report.comments_removed,
            )
            return report

    async def _cascade_video(self, video_id: VideoId) -> CascadeReport:
        comment_ids = await self.comment_repository.find_ids_by_video(video_id)

        reactions_removed = 0
        if comment_ids:
            reactions_removed += await self.reaction_repository.delete_all_by_targets(
                ReactionTargetKind.COMMENT, comment_ids
            )
        comments_removed = await self.comment_repository.delete_by_ids(comment_ids)
        reactions_removed += await self.reaction_repository.delete_all_by_target(
            ReactionTargetKind.VIDEO, video_id
        )

        return CascadeReport(
            reactions_removed=reactions_removed, comments_removed=comments_removed
        )

    async def sweep_orphans(self) -> CascadeReport:
        """Remove dependents whose parent no longer exists.

        Repairs the store after a cascade that raised CascadeIncompleteError.
        Comments of deleted videos go first, together with their reactions,
        so the reaction pass below no longer sees them as live targets.

        Returns:
            Counts of removed comments and reactions
        """
        with logfire.span("cascade.sweep_orphans"):
            comments_removed = 0
            reactions_removed = 0

            referenced = await self.comment_repository.find_video_ids()
            if referenced:
                existing = await self.video_repository.find_existing_ids(
                    list(referenced)
                )
                for video_id in referenced - existing:
                    report = await self._cascade_video(video_id)
                    logfire.warn(
                        "Removed comments of deleted video",
                        video_id=str(video_id),
                        comments=report.comments_removed,
                        reactions=report.reactions_removed,
                    )
                    comments_removed += report.comments_removed
                    reactions_removed += report.reactions_removed

            for kind in ReactionTargetKind:
                target_ids = await self.reaction_repository.find_target_ids(kind)
                if not target_ids:
                    continue

                existing = await self._find_existing_ids(kind, list(target_ids))
                orphaned = target_ids - existing
                if orphaned:
                    removed = await self.reaction_repository.delete_all_by_targets(
                        kind, list(orphaned)
                    )
                    logfire.warn(
                        "Removed orphaned reactions",
                        kind=kind.value,
                        targets=len(orphaned),
                        reactions=removed,
                    )
                    reactions_removed += removed

            report = CascadeReport(
                reactions_removed=reactions_removed, comments_removed=comments_removed
            )
            logfire.info(
                "Orphan sweep complete",
                reactions_removed=report.reactions_removed,
                comments_removed=report.comments_removed,
            )
            return report

    async def _find_existing_ids(
        self, kind: ReactionTargetKind, ids: list[UUID]
    ) -> set[UUID]:
        if kind == ReactionTargetKind.VIDEO:
            return await self.video_repository.find_existing_ids(ids)
        elif kind == ReactionTargetKind.COMMENT:
            return await self.comment_repository.find_existing_ids(ids)
        elif kind == ReactionTargetKind.POST:
            return await self.post_repository.find_existing_ids(ids)
        raise ValueError(f"Unsupported reaction target: {kind}")
