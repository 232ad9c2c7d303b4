"""Repository interfaces for VidTube domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from vidtube.domain.repository.comment import CommentRepository
from vidtube.domain.repository.edge import EdgeRepository
from vidtube.domain.repository.post import PostRepository
from vidtube.domain.repository.reaction import ReactionRepository
from vidtube.domain.repository.subscription import SubscriptionRepository
from vidtube.domain.repository.user import UserRepository
from vidtube.domain.repository.video import VideoRepository

__all__ = [
    "UserRepository",
    "VideoRepository",
    "CommentRepository",
    "PostRepository",
    "EdgeRepository",
    "ReactionRepository",
    "SubscriptionRepository",
]
