"""Strongly typed identifiers for VidTube domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Content entity identifiers
UserId = NewType("UserId", UUID)
VideoId = NewType("VideoId", UUID)
CommentId = NewType("CommentId", UUID)
PostId = NewType("PostId", UUID)

# Edge identifiers
ReactionId = NewType("ReactionId", UUID)
SubscriptionId = NewType("SubscriptionId", UUID)
