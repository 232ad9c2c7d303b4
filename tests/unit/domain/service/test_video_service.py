"""Unit tests for VideoService."""

from uuid import uuid4

import pytest

from vidtube.domain.error import NotAuthorizedError, NotFoundError
from vidtube.domain.repository import UserRepository, VideoRepository
from vidtube.domain.service import VideoService
from vidtube.domain.value import UserId, VideoId
from tests.conftest import make_user, make_video
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestDeleteOwned:
    """Tests for VideoService.delete_owned."""

    @pytest.mark.asyncio
    async def test_owner_deletes_video(self, unit_env):
        video_service = await unit_env.get(VideoService)
        user_repo = await unit_env.get(UserRepository)
        video_repo = await unit_env.get(VideoRepository)

        owner = await user_repo.save(make_user())
        video = await video_repo.save(make_video(owner.id))

        deleted = await video_service.delete_owned(video.id, owner.id)

        assert deleted == video
        assert await video_repo.find_by_id(video.id) is None

    @pytest.mark.asyncio
    async def test_non_owner_raises_not_authorized(self, unit_env):
        video_service = await unit_env.get(VideoService)
        video_repo = await unit_env.get(VideoRepository)

        video = await video_repo.save(make_video(UserId(uuid4())))

        with pytest.raises(NotAuthorizedError, match="not authorized to delete video"):
            await video_service.delete_owned(video.id, UserId(uuid4()))

        assert await video_repo.find_by_id(video.id) is not None

    @pytest.mark.asyncio
    async def test_missing_video_raises_not_found(self, unit_env):
        video_service = await unit_env.get(VideoService)

        with pytest.raises(NotFoundError, match="Video not found"):
            await video_service.delete_owned(VideoId(uuid4()), UserId(uuid4()))
