"""PostgreSQL repository implementations."""

from vidtube.persistence.repository.comment import PostgresCommentRepository
from vidtube.persistence.repository.post import PostgresPostRepository
from vidtube.persistence.repository.reaction import PostgresReactionRepository
from vidtube.persistence.repository.subscription import (
    PostgresSubscriptionRepository,
)
from vidtube.persistence.repository.user import PostgresUserRepository
from vidtube.persistence.repository.video import PostgresVideoRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresVideoRepository",
    "PostgresCommentRepository",
    "PostgresPostRepository",
    "PostgresReactionRepository",
    "PostgresSubscriptionRepository",
]
