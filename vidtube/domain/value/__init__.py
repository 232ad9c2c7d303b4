"""Domain value objects for VidTube."""

from vidtube.domain.value.identifiers import (
    CommentId,
    PostId,
    ReactionId,
    SubscriptionId,
    UserId,
    VideoId,
)
from vidtube.domain.value.types import (
    PageRequest,
    ReactionKey,
    ReactionTargetKind,
    SortDirection,
    StoreConsistency,
    SubscriptionKey,
    ToggleState,
    Username,
    VideoSortField,
)

__all__ = [
    # Identifiers
    "UserId",
    "VideoId",
    "CommentId",
    "PostId",
    "ReactionId",
    "SubscriptionId",
    # Types
    "ReactionTargetKind",
    "ToggleState",
    "SortDirection",
    "StoreConsistency",
    "VideoSortField",
    "Username",
    "ReactionKey",
    "SubscriptionKey",
    "PageRequest",
]
