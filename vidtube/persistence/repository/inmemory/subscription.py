"""In-memory subscription repository for testing."""

from typing import Optional, Sequence

from vidtube.domain.error import ConflictError
from vidtube.domain.model.subscription import Subscription
from vidtube.domain.repository.subscription import SubscriptionRepository
from vidtube.domain.value import SubscriptionKey, UserId

from ._ordering import newest_first


class InMemorySubscriptionRepository(SubscriptionRepository):
    """In-memory implementation of SubscriptionRepository for testing."""

    def __init__(self) -> None:
        self._subscriptions: dict[SubscriptionKey, Subscription] = {}

    async def add_if_absent(self, edge: Subscription) -> bool:
        """Insert the subscription unless the key is taken."""
        if edge.key in self._subscriptions:
            return False
        self._subscriptions[edge.key] = edge
        return True

    async def remove_if_present(self, key: SubscriptionKey) -> Optional[Subscription]:
        """Delete the subscription with this key and return it."""
        return self._subscriptions.pop(key, None)

    async def exists(self, key: SubscriptionKey) -> bool:
        """Check whether the subscription exists."""
        return key in self._subscriptions

    async def find_by_key(self, key: SubscriptionKey) -> Optional[Subscription]:
        """Find the subscription with this key."""
        return self._subscriptions.get(key)

    async def save(self, edge: Subscription) -> Subscription:
        """Insert a subscription.

        Raises:
            ConflictError: If the key is taken
        """
        if edge.key in self._subscriptions:
            raise ConflictError("Subscription", str(edge.key))
        self._subscriptions[edge.key] = edge
        return edge

    async def count_by_channel(self, channel_id: UserId) -> int:
        """Count subscribers of a channel."""
        return sum(1 for s in self._subscriptions.values() if s.channel_id == channel_id)

    async def count_by_channels(
        self, channel_ids: Sequence[UserId]
    ) -> dict[UserId, int]:
        """Count subscribers of many channels."""
        counts = {channel_id: 0 for channel_id in channel_ids}
        for subscription in self._subscriptions.values():
            if subscription.channel_id in counts:
                counts[subscription.channel_id] += 1
        return counts

    async def count_by_subscriber(self, subscriber_id: UserId) -> int:
        """Count channels a user subscribes to."""
        return sum(
            1 for s in self._subscriptions.values() if s.subscriber_id == subscriber_id
        )

    async def find_by_subscriber(
        self, subscriber_id: UserId, limit: int = 10, offset: int = 0
    ) -> list[Subscription]:
        """Find a user's subscriptions, most recent first."""
        subscriptions = [
            s for s in self._subscriptions.values() if s.subscriber_id == subscriber_id
        ]
        return newest_first(subscriptions)[offset : offset + limit]

    async def find_by_channel(
        self, channel_id: UserId, limit: int = 10, offset: int = 0
    ) -> list[Subscription]:
        """Find a channel's subscriptions, most recent first."""
        subscriptions = [
            s for s in self._subscriptions.values() if s.channel_id == channel_id
        ]
        return newest_first(subscriptions)[offset : offset + limit]

    async def find_subscribed_channel_ids(
        self, subscriber_id: UserId, channel_ids: Sequence[UserId]
    ) -> set[UserId]:
        """Find which of the given channels a user subscribes to."""
        wanted = set(channel_ids)
        return {
            s.channel_id
            for s in self._subscriptions.values()
            if s.subscriber_id == subscriber_id and s.channel_id in wanted
        }
