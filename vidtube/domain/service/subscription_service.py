"""Subscription domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from vidtube.domain.model import Subscription, ToggleResult
from vidtube.domain.repository import SubscriptionRepository
from vidtube.domain.value import SubscriptionId, SubscriptionKey, UserId

from .base import Service
from .toggle import toggle_edge
from .user_service import UserService


class SubscriptionService(Service):
    """Domain service for subscribing to channels."""

    def __init__(
        self,
        subscription_repository: SubscriptionRepository,
        user_service: UserService,
    ) -> None:
        """Initialize subscription service.

        Args:
            subscription_repository: Subscription edge store
            user_service: User domain service
        """
        self.subscription_repository = subscription_repository
        self.user_service = user_service

    async def toggle(
        self, subscriber_id: UserId, channel_id: UserId
    ) -> ToggleResult[Subscription]:
        """Subscribe to the channel, or unsubscribe if already subscribed.

        Subscribing to one's own channel is allowed.

        Args:
            subscriber_id: User subscribing
            channel_id: Channel (user) being subscribed to

        Returns:
            Whether the subscription is now present, with the affected edge

        Raises:
            NotFoundError: If the subscriber or the channel does not exist
        """
        with logfire.span(
            "subscription_service.toggle",
            subscriber_id=str(subscriber_id),
            channel_id=str(channel_id),
        ):
            await self.user_service.get_by_id(subscriber_id)
            await self.user_service.get_by_id(channel_id)

            key = SubscriptionKey(subscriber_id=subscriber_id, channel_id=channel_id)
            result = await toggle_edge(
                self.subscription_repository,
                key,
                lambda: Subscription(
                    id=SubscriptionId(uuid4()),
                    subscriber_id=subscriber_id,
                    channel_id=channel_id,
                    created_at=datetime.now(),
                ),
            )

            logfire.info(
                "Subscription toggled",
                subscriber_id=str(subscriber_id),
                channel_id=str(channel_id),
                state=result.state.value,
            )
            return result
