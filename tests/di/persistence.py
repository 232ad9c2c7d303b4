"""Mock persistence providers for testing."""

from dishka import Scope, provide

from vidtube.domain.repository import (
    CommentRepository,
    PostRepository,
    ReactionRepository,
    SubscriptionRepository,
    UserRepository,
    VideoRepository,
)
from vidtube.domain.value import StoreConsistency
from vidtube.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryPostRepository,
    InMemoryReactionRepository,
    InMemorySubscriptionRepository,
    InMemoryUserRepository,
    InMemoryVideoRepository,
)
from vidtube.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so that every request against one container sees the same
    store, the way requests share one database. Each test builds its own
    container, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_store_consistency(self) -> StoreConsistency:
        """In-memory writes are never undone."""
        return StoreConsistency.BEST_EFFORT

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_video_repository(self) -> VideoRepository:
        """Provide in-memory video repository."""
        return InMemoryVideoRepository()

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()

    @provide(scope=Scope.APP)
    def get_post_repository(self) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository()

    @provide(scope=Scope.APP)
    def get_reaction_repository(self) -> ReactionRepository:
        """Provide in-memory reaction edge store."""
        return InMemoryReactionRepository()

    @provide(scope=Scope.APP)
    def get_subscription_repository(self) -> SubscriptionRepository:
        """Provide in-memory subscription edge store."""
        return InMemorySubscriptionRepository()
