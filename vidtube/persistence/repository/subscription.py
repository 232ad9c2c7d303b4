"""PostgreSQL implementation of Subscription repository."""

from typing import Optional, Sequence

import logfire
from sqlalchemy import and_, asc, delete, desc, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from vidtube.domain.error import ConflictError
from vidtube.domain.model import Subscription
from vidtube.domain.repository import SubscriptionRepository
from vidtube.domain.value import SubscriptionKey, UserId
from vidtube.persistence.mappers import row_to_subscription, subscription_to_dict
from vidtube.persistence.tables import subscriptions_table


def _matches_key(key: SubscriptionKey):
    return and_(
        subscriptions_table.c.subscriber_id == key.subscriber_id,
        subscriptions_table.c.channel_id == key.channel_id,
    )


class PostgresSubscriptionRepository(SubscriptionRepository):
    """PostgreSQL implementation of SubscriptionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def add_if_absent(self, edge: Subscription) -> bool:
        """Insert the subscription unless it already exists."""
        with logfire.span("subscription_repository.add_if_absent", key=str(edge.key)):
            stmt = (
                insert(subscriptions_table)
                .values(**subscription_to_dict(edge))
                .on_conflict_do_nothing(constraint="uq_subscription_subscriber_channel")
                .returning(subscriptions_table.c.id)
            )
            result = await self.session.execute(stmt)
            created = result.first() is not None
            await self.session.flush()
            return created

    async def remove_if_present(self, key: SubscriptionKey) -> Optional[Subscription]:
        """Delete the subscription with this key and return it."""
        with logfire.span("subscription_repository.remove_if_present", key=str(key)):
            stmt = (
                delete(subscriptions_table)
                .where(_matches_key(key))
                .returning(subscriptions_table)
            )
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            await self.session.flush()
            return row_to_subscription(dict(row)) if row else None

    async def exists(self, key: SubscriptionKey) -> bool:
        """Check whether the subscription exists."""
        return await self.find_by_key(key) is not None

    async def find_by_key(self, key: SubscriptionKey) -> Optional[Subscription]:
        """Find the subscription with this key."""
        stmt = select(subscriptions_table).where(_matches_key(key))
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_subscription(dict(row)) if row else None

    async def save(self, edge: Subscription) -> Subscription:
        """Insert a subscription, treating a duplicate key as an error."""
        with logfire.span("subscription_repository.save", key=str(edge.key)):
            try:
                async with self.session.begin_nested():
                    await self.session.execute(
                        insert(subscriptions_table).values(**subscription_to_dict(edge))
                    )
            except IntegrityError as e:
                logfire.warn("Duplicate subscription", key=str(edge.key))
                raise ConflictError("Subscription", str(edge.key)) from e
            return edge

    async def count_by_channel(self, channel_id: UserId) -> int:
        """Count subscribers of a channel."""
        stmt = (
            select(func.count())
            .select_from(subscriptions_table)
            .where(subscriptions_table.c.channel_id == channel_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_by_channels(
        self, channel_ids: Sequence[UserId]
    ) -> dict[UserId, int]:
        """Count subscribers of many channels with one grouped query."""
        if not channel_ids:
            return {}

        stmt = (
            select(subscriptions_table.c.channel_id, func.count().label("total"))
            .where(subscriptions_table.c.channel_id.in_(set(channel_ids)))
            .group_by(subscriptions_table.c.channel_id)
        )
        result = await self.session.execute(stmt)
        counts = {row.channel_id: row.total for row in result.all()}
        return {channel_id: counts.get(channel_id, 0) for channel_id in channel_ids}

    async def count_by_subscriber(self, subscriber_id: UserId) -> int:
        """Count channels a user subscribes to."""
        stmt = (
            select(func.count())
            .select_from(subscriptions_table)
            .where(subscriptions_table.c.subscriber_id == subscriber_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_by_subscriber(
        self, subscriber_id: UserId, limit: int = 10, offset: int = 0
    ) -> list[Subscription]:
        """Find a user's subscriptions, most recent first."""
        with logfire.span(
            "subscription_repository.find_by_subscriber",
            subscriber_id=str(subscriber_id),
            limit=limit,
            offset=offset,
        ):
            stmt = (
                select(subscriptions_table)
                .where(subscriptions_table.c.subscriber_id == subscriber_id)
                .order_by(
                    desc(subscriptions_table.c.created_at),
                    asc(subscriptions_table.c.id),
                )
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            return [row_to_subscription(dict(row)) for row in result.mappings().all()]

    async def find_by_channel(
        self, channel_id: UserId, limit: int = 10, offset: int = 0
    ) -> list[Subscription]:
        """Find a channel's subscriptions, most recent first."""
        with logfire.span(
            "subscription_repository.find_by_channel",
            channel_id=str(channel_id),
            limit=limit,
            offset=offset,
        ):
            stmt = (
                select(subscriptions_table)
                .where(subscriptions_table.c.channel_id == channel_id)
                .order_by(
                    desc(subscriptions_table.c.created_at),
                    asc(subscriptions_table.c.id),
                )
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            return [row_to_subscription(dict(row)) for row in result.mappings().all()]

    async def find_subscribed_channel_ids(
        self, subscriber_id: UserId, channel_ids: Sequence[UserId]
    ) -> set[UserId]:
        """Find which of the given channels a user subscribes to."""
        if not channel_ids:
            return set()

        stmt = select(subscriptions_table.c.channel_id).where(
            subscriptions_table.c.subscriber_id == subscriber_id,
            subscriptions_table.c.channel_id.in_(set(channel_ids)),
        )
        result = await self.session.execute(stmt)
        return {UserId(row.channel_id) for row in result.all()}
