"""Unit tests for DeleteCommentUseCase."""

from datetime import datetime
from uuid import uuid4

import pytest

from vidtube.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from vidtube.domain.error import NotAuthorizedError
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


class TestDeleteCommentUseCase:
    """Tests for DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_author_deletes_comment_and_its_likes(self, unit_env):
        use_case = await unit_env.get(DeleteCommentUseCase)
        user_repo = await unit_env.get(UserRepository)
        video_repo = await unit_env.get(VideoRepository)
        comment_repo = await unit_env.get(CommentRepository)
        reaction_repo = await unit_env.get(ReactionRepository)

        author = await user_repo.save(make_user("author"))
        fan = await user_repo.save(make_user("fan"))
        video = await video_repo.save(make_video(author.id))
        comment = await comment_repo.save(make_comment(video.id, author.id))
        for user in (author, fan):
            await reaction_repo.save(
                Reaction(
                    id=ReactionId(uuid4()),
                    actor_id=user.id,
                    target_kind=ReactionTargetKind.COMMENT,
                    target_id=comment.id,
                    created_at=datetime.now(),
                )
            )

        response = await use_case.execute(
            DeleteCommentRequest(comment_id=str(comment.id), user_id=str(author.id))
        )

        assert response.reactions_removed == 2
        assert await comment_repo.find_by_id(comment.id) is None
        assert (
            await reaction_repo.count_by_target(ReactionTargetKind.COMMENT, comment.id)
            == 0
        )
        # The video itself is untouched
        assert await video_repo.find_by_id(video.id) is not None

    @pytest.mark.asyncio
    async def test_video_owner_cannot_delete_someone_elses_comment(self, unit_env):
        use_case = await unit_env.get(DeleteCommentUseCase)
        user_repo = await unit_env.get(UserRepository)
        video_repo = await unit_env.get(VideoRepository)
        comment_repo = await unit_env.get(CommentRepository)

        owner = await user_repo.save(make_user("owner"))
        author = await user_repo.save(make_user("author"))
        video = await video_repo.save(make_video(owner.id))
        comment = await comment_repo.save(make_comment(video.id, author.id))

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                DeleteCommentRequest(comment_id=str(comment.id), user_id=str(owner.id))
            )
