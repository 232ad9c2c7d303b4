"""Channel use cases."""

from .get_channel_profile import (
    GetChannelProfileRequest,
    GetChannelProfileResponse,
    GetChannelProfileUseCase,
)
from .get_channel_stats import (
    GetChannelStatsRequest,
    GetChannelStatsResponse,
    GetChannelStatsUseCase,
)

__all__ = [
    "GetChannelProfileRequest",
    "GetChannelProfileResponse",
    "GetChannelProfileUseCase",
    "GetChannelStatsRequest",
    "GetChannelStatsResponse",
    "GetChannelStatsUseCase",
]
