"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from vidtube.config import Settings
from vidtube.domain.repository import (
    CommentRepository,
    PostRepository,
    ReactionRepository,
    SubscriptionRepository,
    UserRepository,
    VideoRepository,
)
from vidtube.domain.value import StoreConsistency
from vidtube.persistence.database import create_engine, create_session_factory
from vidtube.persistence.repository import (
    PostgresCommentRepository,
    PostgresPostRepository,
    PostgresReactionRepository,
    PostgresSubscriptionRepository,
    PostgresUserRepository,
    PostgresVideoRepository,
)
from vidtube.util.di.base import ProviderBase
from vidtube.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_store_consistency(self) -> StoreConsistency:
        """A failed request rolls back its whole session."""
        return StoreConsistency.TRANSACTIONAL

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide the database engine; its pool is disposed with the container."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is committed at the end of the request if no exception
        occurred, or rolled back if an exception was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_video_repository(self, session: AsyncSession) -> VideoRepository:
        """Provide Video repository."""
        return PostgresVideoRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, session: AsyncSession) -> PostRepository:
        """Provide Post repository."""
        return PostgresPostRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_reaction_repository(self, session: AsyncSession) -> ReactionRepository:
        """Provide Reaction edge store."""
        return PostgresReactionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_subscription_repository(
        self, session: AsyncSession
    ) -> SubscriptionRepository:
        """Provide Subscription edge store."""
        return PostgresSubscriptionRepository(session)
