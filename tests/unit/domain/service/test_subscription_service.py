"""Unit tests for SubscriptionService."""

from uuid import uuid4

import pytest

from vidtube.domain.error import NotFoundError
from vidtube.domain.repository import SubscriptionRepository, UserRepository
from vidtube.domain.service import SubscriptionService
from vidtube.domain.value import ToggleState, UserId
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestToggleSubscription:
    """Tests for SubscriptionService.toggle."""

    @pytest.mark.asyncio
    async def test_subscribe_then_unsubscribe(self, unit_env):
        subscription_service = await unit_env.get(SubscriptionService)
        subscription_repo = await unit_env.get(SubscriptionRepository)
        user_repo = await unit_env.get(UserRepository)

        subscriber = await user_repo.save(make_user("fan"))
        channel = await user_repo.save(make_user("creator"))

        first = await subscription_service.toggle(subscriber.id, channel.id)
        assert first.state == ToggleState.ADDED
        assert await subscription_repo.count_by_channel(channel.id) == 1

        second = await subscription_service.toggle(subscriber.id, channel.id)
        assert second.state == ToggleState.REMOVED
        assert await subscription_repo.count_by_channel(channel.id) == 0

    @pytest.mark.asyncio
    async def test_self_subscription_is_allowed(self, unit_env):
        subscription_service = await unit_env.get(SubscriptionService)
        user_repo = await unit_env.get(UserRepository)

        user = await user_repo.save(make_user())

        result = await subscription_service.toggle(user.id, user.id)

        assert result.state == ToggleState.ADDED
        assert result.edge.subscriber_id == result.edge.channel_id == user.id

    @pytest.mark.asyncio
    async def test_missing_channel_raises_not_found(self, unit_env):
        subscription_service = await unit_env.get(SubscriptionService)
        subscription_repo = await unit_env.get(SubscriptionRepository)
        user_repo = await unit_env.get(UserRepository)

        subscriber = await user_repo.save(make_user())
        missing = UserId(uuid4())

        with pytest.raises(NotFoundError):
            await subscription_service.toggle(subscriber.id, missing)

        assert await subscription_repo.count_by_channel(missing) == 0
