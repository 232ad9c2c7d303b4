"""Subscription edge."""

from datetime import datetime

from pydantic import Field

from vidtube.domain.model.common import DomainModel
from vidtube.domain.value import SubscriptionId, SubscriptionKey, UserId


class Subscription(DomainModel):
    """A subscriber following a channel.

    One subscription per subscriber per channel. Subscribing to your own
    channel is allowed.
    """

    id: SubscriptionId
    subscriber_id: UserId
    channel_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def key(self) -> SubscriptionKey:
        """Natural key of this edge."""
        return SubscriptionKey(
            subscriber_id=self.subscriber_id, channel_id=self.channel_id
        )
