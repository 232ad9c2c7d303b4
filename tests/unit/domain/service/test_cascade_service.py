"""Unit tests for CascadeService."""

from datetime import datetime
from typing import Sequence
from uuid import UUID, uuid4

import pytest

from vidtube.domain.error import CascadeIncompleteError
from vidtube.domain.model import Reaction
from vidtube.domain.repository import (
    CommentRepository,
    PostRepository,
    ReactionRepository,
    UserRepository,
    VideoRepository,
)
from vidtube.domain.service import CascadeService
from vidtube.domain.value import (
    CommentId,
    ReactionId,
    ReactionTargetKind,
    StoreConsistency,
    UserId,
)
from vidtube.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryPostRepository,
    InMemoryReactionRepository,
    InMemoryVideoRepository,
)
from tests.conftest import make_comment, make_post, make_user, make_video
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def _reaction(actor_id: UserId, kind: ReactionTargetKind, target_id: UUID) -> Reaction:
    return Reaction(
        id=ReactionId(uuid4()),
        actor_id=actor_id,
        target_kind=kind,
        target_id=target_id,
        created_at=datetime.now(),
    )


class FailingBulkDeleteReactionRepository(InMemoryReactionRepository):
    """Fails when asked to delete reactions on many targets at once."""

    async def delete_all_by_targets(
        self, target_kind: ReactionTargetKind, target_ids: Sequence[UUID]
    ) -> int:
        raise ConnectionError("store unavailable")


class FlakyCommentRepository(InMemoryCommentRepository):
    """Fails bulk comment deletes until ``available`` is set."""

    def __init__(self) -> None:
        super().__init__()
        self.available = False

    async def delete_by_ids(self, comment_ids: Sequence[CommentId]) -> int:
        if not self.available:
            raise ConnectionError("store unavailable")
        return await super().delete_by_ids(comment_ids)


class TestCascadeVideo:
    """Deleting a video removes its comments and every reaction beneath it."""

    @pytest.mark.asyncio
    async def test_video_cascade_removes_comments_and_all_reactions(self, unit_env):
        # Arrange
        cascade_service = await unit_env.get(CascadeService)
        reaction_repo = await unit_env.get(ReactionRepository)
        comment_repo = await unit_env.get(CommentRepository)
        video_repo = await unit_env.get(VideoRepository)
        user_repo = await unit_env.get(UserRepository)

        owner = await user_repo.save(make_user("owner"))
        fans = [await user_repo.save(make_user(f"fan{i}")) for i in range(3)]
        video = await video_repo.save(make_video(owner.id))
        comments = [
            await comment_repo.save(make_comment(video.id, fan.id)) for fan in fans
        ]

        # 5 comment reactions and 2 video reactions
        for comment in comments:
            await reaction_repo.save(
                _reaction(owner.id, ReactionTargetKind.COMMENT, comment.id)
            )
        await reaction_repo.save(
            _reaction(fans[0].id, ReactionTargetKind.COMMENT, comments[1].id)
        )
        await reaction_repo.save(
            _reaction(fans[1].id, ReactionTargetKind.COMMENT, comments[2].id)
        )
        await reaction_repo.save(_reaction(fans[0].id, ReactionTargetKind.VIDEO, video.id))
        await reaction_repo.save(_reaction(fans[2].id, ReactionTargetKind.VIDEO, video.id))

        # An unrelated video keeps its comment and reaction
        other = await video_repo.save(make_video(owner.id, title="Other"))
        other_comment = await comment_repo.save(make_comment(other.id, owner.id))
        await reaction_repo.save(_reaction(fans[0].id, ReactionTargetKind.VIDEO, other.id))

        await video_repo.delete(video.id)

        # Act
        report = await cascade_service.on_entity_deleted(
            ReactionTargetKind.VIDEO, video.id
        )

        # Assert
        assert report.comments_removed == 3
        assert report.reactions_removed == 7
        assert await comment_repo.count_by_video(video.id) == 0
        assert await reaction_repo.count_by_target(ReactionTargetKind.VIDEO, video.id) == 0
        counts = await reaction_repo.count_by_targets(
            ReactionTargetKind.COMMENT, [c.id for c in comments]
        )
        assert sum(counts.values()) == 0

        assert await comment_repo.find_by_id(other_comment.id) is not None
        assert await reaction_repo.count_by_target(ReactionTargetKind.VIDEO, other.id) == 1

    @pytest.mark.asyncio
    async def test_video_without_dependents_reports_nothing_removed(self, unit_env):
        cascade_service = await unit_env.get(CascadeService)

        report = await cascade_service.on_entity_deleted(
            ReactionTargetKind.VIDEO, uuid4()
        )

        assert report.comments_removed == 0
        assert report.reactions_removed == 0


class TestCascadeLeaf:
    """Comments and posts only carry reactions."""

    @pytest.mark.asyncio
    async def test_comment_cascade_removes_its_reactions(self, unit_env):
        cascade_service = await unit_env.get(CascadeService)
        reaction_repo = await unit_env.get(ReactionRepository)
        user_repo = await unit_env.get(UserRepository)

        user = await user_repo.save(make_user())
        comment_id = uuid4()
        await reaction_repo.save(_reaction(user.id, ReactionTargetKind.COMMENT, comment_id))

        report = await cascade_service.on_entity_deleted(
            ReactionTargetKind.COMMENT, comment_id
        )

        assert report.reactions_removed == 1
        assert report.comments_removed == 0

    @pytest.mark.asyncio
    async def test_post_cascade_removes_its_reactions(self, unit_env):
        cascade_service = await unit_env.get(CascadeService)
        reaction_repo = await unit_env.get(ReactionRepository)
        user_repo = await unit_env.get(UserRepository)

        users = [await user_repo.save(make_user(f"user{i}")) for i in range(2)]
        post_id = uuid4()
        for user in users:
            await reaction_repo.save(_reaction(user.id, ReactionTargetKind.POST, post_id))

        report = await cascade_service.on_entity_deleted(ReactionTargetKind.POST, post_id)

        assert report.reactions_removed == 2
        assert await reaction_repo.count_by_target(ReactionTargetKind.POST, post_id) == 0


class TestCascadeFailure:
    """Failures surface as CascadeIncompleteError."""

    @pytest.mark.asyncio
    async def test_store_failure_raises_cascade_incomplete_with_cause(self):
        reaction_repo = FailingBulkDeleteReactionRepository()
        comment_repo = InMemoryCommentRepository()
        cascade_service = CascadeService(
            reaction_repository=reaction_repo,
            comment_repository=comment_repo,
            video_repository=InMemoryVideoRepository(),
            post_repository=InMemoryPostRepository(),
        )

        owner_id = UserId(uuid4())
        video = make_video(owner_id)
        comment = await comment_repo.save(make_comment(video.id, owner_id))

        with pytest.raises(CascadeIncompleteError) as exc_info:
            await cascade_service.on_entity_deleted(ReactionTargetKind.VIDEO, video.id)

        assert exc_info.value.kind == "cascade_incomplete"
        assert isinstance(exc_info.value.__cause__, ConnectionError)
        assert exc_info.value.rolled_back is False
        # Comment reactions go first, so the comment is still there to retry
        assert await comment_repo.find_by_id(comment.id) is not None

    @pytest.mark.asyncio
    async def test_transactional_store_reports_rollback(self):
        cascade_service = CascadeService(
            reaction_repository=FailingBulkDeleteReactionRepository(),
            comment_repository=InMemoryCommentRepository(),
            video_repository=InMemoryVideoRepository(),
            post_repository=InMemoryPostRepository(),
            consistency=StoreConsistency.TRANSACTIONAL,
        )
        owner_id = UserId(uuid4())
        video = make_video(owner_id)
        await cascade_service.comment_repository.save(make_comment(video.id, owner_id))

        with pytest.raises(CascadeIncompleteError) as exc_info:
            await cascade_service.on_entity_deleted(ReactionTargetKind.VIDEO, video.id)

        assert exc_info.value.rolled_back is True
        assert "rolled back" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_container_wires_in_memory_store_as_best_effort(self, unit_env):
        cascade_service = await unit_env.get(CascadeService)

        assert cascade_service.consistency == StoreConsistency.BEST_EFFORT


class TestSweepOrphans:
    """The repair sweep removes dependents of deleted parents."""

    @pytest.mark.asyncio
    async def test_sweep_removes_only_dangling_reactions(self, unit_env):
        cascade_service = await unit_env.get(CascadeService)
        reaction_repo = await unit_env.get(ReactionRepository)
        user_repo = await unit_env.get(UserRepository)
        video_repo = await unit_env.get(VideoRepository)
        post_repo = await unit_env.get(PostRepository)

        user = await user_repo.save(make_user())
        live_video = await video_repo.save(make_video(user.id))
        live_post = await post_repo.save(make_post(user.id))

        await reaction_repo.save(_reaction(user.id, ReactionTargetKind.VIDEO, live_video.id))
        await reaction_repo.save(_reaction(user.id, ReactionTargetKind.POST, live_post.id))
        await reaction_repo.save(_reaction(user.id, ReactionTargetKind.VIDEO, uuid4()))
        await reaction_repo.save(_reaction(user.id, ReactionTargetKind.COMMENT, uuid4()))
        await reaction_repo.save(_reaction(user.id, ReactionTargetKind.POST, uuid4()))

        report = await cascade_service.sweep_orphans()

        assert report.reactions_removed == 3
        assert report.comments_removed == 0
        assert (
            await reaction_repo.count_by_target(ReactionTargetKind.VIDEO, live_video.id)
            == 1
        )
        assert await reaction_repo.count_by_target(ReactionTargetKind.POST, live_post.id) == 1

    @pytest.mark.asyncio
    async def test_sweep_on_clean_store_removes_nothing(self, unit_env):
        cascade_service = await unit_env.get(CascadeService)

        report = await cascade_service.sweep_orphans()

        assert report.reactions_removed == 0
        assert report.comments_removed == 0

    @pytest.mark.asyncio
    async def test_sweep_finishes_video_cascade_that_failed_at_comments(self):
        # Arrange: the cascade fails after removing comment reactions
        reaction_repo = InMemoryReactionRepository()
        comment_repo = FlakyCommentRepository()
        video_repo = InMemoryVideoRepository()
        cascade_service = CascadeService(
            reaction_repository=reaction_repo,
            comment_repository=comment_repo,
            video_repository=video_repo,
            post_repository=InMemoryPostRepository(),
        )

        owner_id = UserId(uuid4())
        fan_id = UserId(uuid4())
        video = await video_repo.save(make_video(owner_id))
        kept_video = await video_repo.save(make_video(owner_id, title="Kept"))
        comments = [
            await comment_repo.save(make_comment(video.id, fan_id, f"c{i}"))
            for i in range(2)
        ]
        kept_comment = await comment_repo.save(make_comment(kept_video.id, fan_id))
        await reaction_repo.save(_reaction(fan_id, ReactionTargetKind.VIDEO, video.id))
        await reaction_repo.save(
            _reaction(owner_id, ReactionTargetKind.COMMENT, kept_comment.id)
        )

        await video_repo.delete(video.id)
        with pytest.raises(CascadeIncompleteError):
            await cascade_service.on_entity_deleted(ReactionTargetKind.VIDEO, video.id)
        assert len(await comment_repo.find_ids_by_video(video.id)) == 2

        # Reactions created on the surviving comments after the failure
        for comment in comments:
            await reaction_repo.save(
                _reaction(owner_id, ReactionTargetKind.COMMENT, comment.id)
            )

        # Act: the store is healthy again
        comment_repo.available = True
        report = await cascade_service.sweep_orphans()

        # Assert
        assert report.comments_removed == 2
        assert report.reactions_removed == 3
        assert await comment_repo.find_ids_by_video(video.id) == []
        assert await reaction_repo.count_by_target(ReactionTargetKind.VIDEO, video.id) == 0
        counts = await reaction_repo.count_by_targets(
            ReactionTargetKind.COMMENT, [c.id for c in comments]
        )
        assert sum(counts.values()) == 0

        assert await comment_repo.find_by_id(kept_comment.id)
        assert (
            await reaction_repo.count_by_target(
                ReactionTargetKind.COMMENT, kept_comment.id
            )
            == 1
        )
