"""Toggle subscription use case."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from vidtube.application.usecase.base import BaseUseCase
from vidtube.application.usecase.common import APIModel
from vidtube.domain.model import Subscription
from vidtube.domain.service import SubscriptionService
from vidtube.domain.value import ToggleState, UserId


class ToggleSubscriptionRequest(BaseModel):
    """Toggle subscription request."""

    subscriber_id: str  # User ID from authenticated user
    channel_id: str


class SubscriptionEdgeItem(APIModel):
    """Subscription edge in a response."""

    id: str
    subscriber_id: str
    channel_id: str
    created_at: datetime

    @classmethod
    def from_edge(cls, edge: Subscription) -> "SubscriptionEdgeItem":
        return cls(
            id=str(edge.id),
            subscriber_id=str(edge.subscriber_id),
            channel_id=str(edge.channel_id),
            created_at=edge.created_at,
        )


class ToggleSubscriptionResponse(APIModel):
    """Toggle subscription response; ``edge`` as for reactions."""

    state: ToggleState
    edge: Optional[SubscriptionEdgeItem] = None
    channel_id: str
    is_subscribed: bool


class ToggleSubscriptionUseCase(BaseUseCase):
    """Use case for subscribing to or unsubscribing from a channel."""

    def __init__(self, subscription_service: SubscriptionService) -> None:
        """Initialize toggle subscription use case.

        Args:
            subscription_service: Subscription domain service
        """
        self.subscription_service = subscription_service

    async def execute(
        self, request: ToggleSubscriptionRequest
    ) -> ToggleSubscriptionResponse:
        """Execute toggle subscription flow.

        Raises:
            NotFoundError: If the subscriber or the channel does not exist
        """
        result = await self.subscription_service.toggle(
            subscriber_id=UserId(UUID(request.subscriber_id)),
            channel_id=UserId(UUID(request.channel_id)),
        )

        return ToggleSubscriptionResponse(
            state=result.state,
            edge=SubscriptionEdgeItem.from_edge(result.edge) if result.edge else None,
            channel_id=request.channel_id,
            is_subscribed=result.state == ToggleState.ADDED,
        )
