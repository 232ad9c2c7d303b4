"""Unit tests for DeleteVideoUseCase."""

from datetime import datetime
from uuid import uuid4

import pytest

from vidtube.application.usecase.video import DeleteVideoRequest, DeleteVideoUseCase
from vidtube.domain.error import NotAuthorizedError, NotFoundError
from vidtube.domain.model import Reaction
from vidtube.domain.repository import (
    CommentRepository,
    ReactionRepository,
    UserRepository,
    VideoRepository,
)
from vidtube.domain.value import ReactionId, ReactionTargetKind
from tests.conftest import make_comment, make_user, make_video
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestDeleteVideoUseCase:
    """Tests for DeleteVideoUseCase."""

    @pytest.mark.asyncio
    async def test_owner_deletes_video_and_dependents(self, unit_env):
        # Arrange
        use_case = await unit_env.get(DeleteVideoUseCase)
        user_repo = await unit_env.get(UserRepository)
        video_repo = await unit_env.get(VideoRepository)
        comment_repo = await unit_env.get(CommentRepository)
        reaction_repo = await unit_env.get(ReactionRepository)

        owner = await user_repo.save(make_user())
        video = await video_repo.save(make_video(owner.id))
        comment = await comment_repo.save(make_comment(video.id, owner.id))
        await reaction_repo.save(
            Reaction(
                id=ReactionId(uuid4()),
                actor_id=owner.id,
                target_kind=ReactionTargetKind.COMMENT,
                target_id=comment.id,
                created_at=datetime.now(),
            )
        )

        # Act
        response = await use_case.execute(
            DeleteVideoRequest(video_id=str(video.id), user_id=str(owner.id))
        )

        # Assert
        assert response.video_id == str(video.id)
        assert response.comments_removed == 1
        assert response.reactions_removed == 1
        assert await video_repo.find_by_id(video.id) is None
        assert await comment_repo.find_by_id(comment.id) is None

    @pytest.mark.asyncio
    async def test_non_owner_is_forbidden_and_nothing_is_deleted(self, unit_env):
        use_case = await unit_env.get(DeleteVideoUseCase)
        user_repo = await unit_env.get(UserRepository)
        video_repo = await unit_env.get(VideoRepository)
        comment_repo = await unit_env.get(CommentRepository)

        owner = await user_repo.save(make_user("owner"))
        intruder = await user_repo.save(make_user("intruder"))
        video = await video_repo.save(make_video(owner.id))
        comment = await comment_repo.save(make_comment(video.id, owner.id))

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                DeleteVideoRequest(video_id=str(video.id), user_id=str(intruder.id))
            )

        assert await video_repo.find_by_id(video.id) is not None
        assert await comment_repo.find_by_id(comment.id) is not None

    @pytest.mark.asyncio
    async def test_missing_video_raises_not_found(self, unit_env):
        use_case = await unit_env.get(DeleteVideoUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                DeleteVideoRequest(video_id=str(uuid4()), user_id=str(uuid4()))
            )
