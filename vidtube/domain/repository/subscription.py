"""Subscription repository interface."""

from abc import abstractmethod
from typing import Sequence

from vidtube.domain.model.subscription import Subscription
from vidtube.domain.repository.edge import EdgeRepository
from vidtube.domain.value import SubscriptionKey, UserId


class SubscriptionRepository(EdgeRepository[SubscriptionKey, Subscription]):
    """Repository for subscription edges."""

    @abstractmethod
    async def count_by_channel(self, channel_id: UserId) -> int:
        """Count subscribers of a channel."""
        pass

    @abstractmethod
    async def count_by_channels(
        self, channel_ids: Sequence[UserId]
    ) -> dict[UserId, int]:
        """Count subscribers of many channels (batch query).

        Returns:
            Mapping of channel ID to subscriber count; missing channels map to 0
        """
        pass

    @abstractmethod
    async def count_by_subscriber(self, subscriber_id: UserId) -> int:
        """Count channels a user subscribes to."""
        pass

    @abstractmethod
    async def find_by_subscriber(
        self, subscriber_id: UserId, limit: int = 10, offset: int = 0
    ) -> list[Subscription]:
        """Find a user's subscriptions, most recent first.

        Args:
            subscriber_id: The subscriber's user ID
            limit: Maximum number of subscriptions to return
            offset: Number of subscriptions to skip

        Returns:
            Subscriptions ordered by creation time descending, then ID ascending
        """
        pass

    @abstractmethod
    async def find_by_channel(
        self, channel_id: UserId, limit: int = 10, offset: int = 0
    ) -> list[Subscription]:
        """Find a channel's subscriptions, most recent first."""
        pass

    @abstractmethod
    async def find_subscribed_channel_ids(
        self, subscriber_id: UserId, channel_ids: Sequence[UserId]
    ) -> set[UserId]:
        """Find which of the given channels a user subscribes to (batch query)."""
        pass

