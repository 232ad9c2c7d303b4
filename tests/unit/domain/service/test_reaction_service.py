"""Unit tests for ReactionService."""

from uuid import uuid4

import pytest

from vidtube.domain.error import NotFoundError
from vidtube.domain.repository import (
    CommentRepository,
    PostRepository,
    ReactionRepository,
    UserRepository,
    VideoRepository,
)
from vidtube.domain.service import ReactionService
from vidtube.domain.value import ReactionKey, ReactionTargetKind, ToggleState, UserId
from tests.conftest import make_comment, make_post, make_user, make_video
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestToggleReaction:
    """Tests for ReactionService.toggle."""

    @pytest.mark.asyncio
    async def test_like_then_unlike_video(self, unit_env):
        """Toggling twice returns the target to its original state."""
        # Arrange
        reaction_service = await unit_env.get(ReactionService)
        reaction_repo = await unit_env.get(ReactionRepository)
        user_repo = await unit_env.get(UserRepository)
        video_repo = await unit_env.get(VideoRepository)

        owner = await user_repo.save(make_user("owner"))
        viewer = await user_repo.save(make_user("viewer"))
        video = await video_repo.save(make_video(owner.id))

        # Act
        first = await reaction_service.toggle(
            viewer.id, ReactionTargetKind.VIDEO, video.id
        )
        second = await reaction_service.toggle(
            viewer.id, ReactionTargetKind.VIDEO, video.id
        )

        # Assert
        assert first.state == ToggleState.ADDED
        assert second.state == ToggleState.REMOVED
        assert second.edge.id == first.edge.id
        key = ReactionKey(
            actor_id=viewer.id, target_kind=ReactionTargetKind.VIDEO, target_id=video.id
        )
        assert not await reaction_repo.exists(key)

    @pytest.mark.asyncio
    async def test_like_comment_and_post(self, unit_env):
        """Comments and posts are reaction targets too."""
        reaction_service = await unit_env.get(ReactionService)
        reaction_repo = await unit_env.get(ReactionRepository)
        user_repo = await unit_env.get(UserRepository)
        video_repo = await unit_env.get(VideoRepository)
        comment_repo = await unit_env.get(CommentRepository)
        post_repo = await unit_env.get(PostRepository)

        user = await user_repo.save(make_user())
        video = await video_repo.save(make_video(user.id))
        comment = await comment_repo.save(make_comment(video.id, user.id))
        post = await post_repo.save(make_post(user.id))

        on_comment = await reaction_service.toggle(
            user.id, ReactionTargetKind.COMMENT, comment.id
        )
        on_post = await reaction_service.toggle(user.id, ReactionTargetKind.POST, post.id)

        assert on_comment.state == ToggleState.ADDED
        assert on_comment.edge.target_kind == ReactionTargetKind.COMMENT
        assert on_post.state == ToggleState.ADDED
        assert on_post.edge.target_kind == ReactionTargetKind.POST
        assert (
            await reaction_repo.count_by_target(ReactionTargetKind.COMMENT, comment.id)
            == 1
        )
        assert await reaction_repo.count_by_target(ReactionTargetKind.POST, post.id) == 1

    @pytest.mark.asyncio
    async def test_same_id_under_different_kinds_is_a_different_edge(self, unit_env):
        """The target kind is part of the edge key."""
        reaction_service = await unit_env.get(ReactionService)
        reaction_repo = await unit_env.get(ReactionRepository)
        user_repo = await unit_env.get(UserRepository)
        video_repo = await unit_env.get(VideoRepository)
        post_repo = await unit_env.get(PostRepository)

        user = await user_repo.save(make_user())
        video = await video_repo.save(make_video(user.id))
        # A post that happens to share the video's ID
        post = make_post(user.id).model_copy(update={"id": video.id})
        await post_repo.save(post)

        await reaction_service.toggle(user.id, ReactionTargetKind.VIDEO, video.id)
        await reaction_service.toggle(user.id, ReactionTargetKind.POST, post.id)

        assert await reaction_repo.count_by_target(ReactionTargetKind.VIDEO, video.id) == 1
        assert await reaction_repo.count_by_target(ReactionTargetKind.POST, post.id) == 1

    @pytest.mark.asyncio
    async def test_self_like_is_allowed(self, unit_env):
        """Owners may like their own content."""
        reaction_service = await unit_env.get(ReactionService)
        user_repo = await unit_env.get(UserRepository)
        video_repo = await unit_env.get(VideoRepository)

        owner = await user_repo.save(make_user())
        video = await video_repo.save(make_video(owner.id))

        result = await reaction_service.toggle(
            owner.id, ReactionTargetKind.VIDEO, video.id
        )

        assert result.state == ToggleState.ADDED

    @pytest.mark.asyncio
    async def test_missing_target_raises_not_found(self, unit_env):
        """Reacting to a target that does not exist fails."""
        reaction_service = await unit_env.get(ReactionService)
        reaction_repo = await unit_env.get(ReactionRepository)
        user_repo = await unit_env.get(UserRepository)

        user = await user_repo.save(make_user())
        missing_id = uuid4()

        with pytest.raises(NotFoundError):
            await reaction_service.toggle(user.id, ReactionTargetKind.VIDEO, missing_id)

        assert (
            await reaction_repo.count_by_target(ReactionTargetKind.VIDEO, missing_id)
            == 0
        )

    @pytest.mark.asyncio
    async def test_missing_actor_raises_not_found(self, unit_env):
        """Unknown actors cannot react."""
        reaction_service = await unit_env.get(ReactionService)
        user_repo = await unit_env.get(UserRepository)
        video_repo = await unit_env.get(VideoRepository)

        owner = await user_repo.save(make_user())
        video = await video_repo.save(make_video(owner.id))

        with pytest.raises(NotFoundError, match="User not found"):
            await reaction_service.toggle(
                UserId(uuid4()), ReactionTargetKind.VIDEO, video.id
            )
