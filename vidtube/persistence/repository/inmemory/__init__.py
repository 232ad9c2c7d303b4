"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .post import InMemoryPostRepository
from .reaction import InMemoryReactionRepository
from .subscription import InMemorySubscriptionRepository
from .user import InMemoryUserRepository
from .video import InMemoryVideoRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryPostRepository",
    "InMemoryReactionRepository",
    "InMemorySubscriptionRepository",
    "InMemoryUserRepository",
    "InMemoryVideoRepository",
]
