"""Subscription use cases."""

from .list_channel_subscribers import (
    ListChannelSubscribersRequest,
    ListChannelSubscribersResponse,
    ListChannelSubscribersUseCase,
)
from .list_subscribed_channels import (
    ListSubscribedChannelsRequest,
    ListSubscribedChannelsUseCase,
)
from .toggle_subscription import (
    ToggleSubscriptionRequest,
    ToggleSubscriptionResponse,
    ToggleSubscriptionUseCase,
)

__all__ = [
    "ListChannelSubscribersRequest",
    "ListChannelSubscribersResponse",
    "ListChannelSubscribersUseCase",
    "ListSubscribedChannelsRequest",
    "ListSubscribedChannelsUseCase",
    "ToggleSubscriptionRequest",
    "ToggleSubscriptionResponse",
    "ToggleSubscriptionUseCase",
]
