"""PostgreSQL implementation of Reaction repository.

The ``uq_reaction_actor_target`` constraint enforces one reaction per actor
and target. Conditional writes rely on it through ``ON CONFLICT DO NOTHING``
and ``DELETE ... RETURNING`` so that racing toggles never create duplicates.
"""

from typing import Optional, Sequence
from uuid import UUID

import logfire
from sqlalchemy import and_, asc, delete, desc, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from vidtube.domain.error import ConflictError
from vidtube.domain.model import Reaction
from vidtube.domain.repository import ReactionRepository
from vidtube.domain.value import ReactionKey, ReactionTargetKind, UserId
from vidtube.persistence.mappers import reaction_to_dict, row_to_reaction
from vidtube.persistence.tables import reactions_table


def _matches_key(key: ReactionKey):
    return and_(
        reactions_table.c.actor_id == key.actor_id,
        reactions_table.c.target_kind == key.target_kind.value,
        reactions_table.c.target_id == key.target_id,
    )


class PostgresReactionRepository(ReactionRepository):
    """PostgreSQL implementation of ReactionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def add_if_absent(self, edge: Reaction) -> bool:
        """Insert the reaction unless the actor already reacted to the target."""
        with logfire.span("reaction_repository.add_if_absent", key=str(edge.key)):
            stmt = (
                insert(reactions_table)
                .values(**reaction_to_dict(edge))
                .on_conflict_do_nothing(constraint="uq_reaction_actor_target")
                .returning(reactions_table.c.id)
            )
            result = await self.session.execute(stmt)
            created = result.first() is not None
            await self.session.flush()
            return created

    async def remove_if_present(self, key: ReactionKey) -> Optional[Reaction]:
        """Delete the reaction with this key and return it."""
        with logfire.span("reaction_repository.remove_if_present", key=str(key)):
            stmt = delete(reactions_table).where(_matches_key(key)).returning(
                reactions_table
            )
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            await self.session.flush()
            return row_to_reaction(dict(row)) if row else None

    async def exists(self, key: ReactionKey) -> bool:
        """Check whether the actor has reacted to the target."""
        return await self.find_by_key(key) is not None

    async def find_by_key(self, key: ReactionKey) -> Optional[Reaction]:
        """Find the reaction with this key."""
        stmt = select(reactions_table).where(_matches_key(key))
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_reaction(dict(row)) if row else None

    async def save(self, edge: Reaction) -> Reaction:
        """Insert a reaction, treating a duplicate key as an error."""
        with logfire.span("reaction_repository.save", key=str(edge.key)):
            try:
                # Savepoint keeps the request transaction usable after a conflict
                async with self.session.begin_nested():
                    await self.session.execute(
                        insert(reactions_table).values(**reaction_to_dict(edge))
                    )
            except IntegrityError as e:
                logfire.warn("Duplicate reaction", key=str(edge.key))
                raise ConflictError("Reaction", str(edge.key)) from e
            return edge

    async def count_by_target(
        self, target_kind: ReactionTargetKind, target_id: UUID
    ) -> int:
        """Count reactions on one target."""
        stmt = (
            select(func.count())
            .select_from(reactions_table)
            .where(
                reactions_table.c.target_kind == target_kind.value,
                reactions_table.c.target_id == target_id,
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_by_targets(
        self, target_kind: ReactionTargetKind, target_ids: Sequence[UUID]
    ) -> dict[UUID, int]:
        """Count reactions on many targets with one grouped query."""
        if not target_ids:
            return {}

        with logfire.span(
            "reaction_repository.count_by_targets",
            target_kind=target_kind.value,
            count=len(target_ids),
        ):
            stmt = (
                select(reactions_table.c.target_id, func.count().label("total"))
                .where(
                    reactions_table.c.target_kind == target_kind.value,
                    reactions_table.c.target_id.in_(set(target_ids)),
                )
                .group_by(reactions_table.c.target_id)
            )
            result = await self.session.execute(stmt)
            counts = {row.target_id: row.total for row in result.all()}
            return {target_id: counts.get(target_id, 0) for target_id in target_ids}

    async def find_reacted_target_ids(
        self,
        actor_id: UserId,
        target_kind: ReactionTargetKind,
        target_ids: Sequence[UUID],
    ) -> set[UUID]:
        """Find which of the given targets an actor has reacted to."""
        if not target_ids:
            return set()

        stmt = select(reactions_table.c.target_id).where(
            reactions_table.c.actor_id == actor_id,
            reactions_table.c.target_kind == target_kind.value,
            reactions_table.c.target_id.in_(set(target_ids)),
        )
        result = await self.session.execute(stmt)
        return {row.target_id for row in result.all()}

    async def find_by_actor(
        self,
        actor_id: UserId,
        target_kind: ReactionTargetKind,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Reaction]:
        """Find an actor's reactions, most recent first."""
        with logfire.span(
            "reaction_repository.find_by_actor",
            actor_id=str(actor_id),
            target_kind=target_kind.value,
            limit=limit,
            offset=offset,
        ):
            stmt = (
                select(reactions_table)
                .where(
                    reactions_table.c.actor_id == actor_id,
                    reactions_table.c.target_kind == target_kind.value,
                )
                .order_by(desc(reactions_table.c.created_at), asc(reactions_table.c.id))
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            return [row_to_reaction(dict(row)) for row in result.mappings().all()]

    async def count_by_actor(
        self, actor_id: UserId, target_kind: ReactionTargetKind
    ) -> int:
        """Count an actor's reactions on targets of one kind."""
        stmt = (
            select(func.count())
            .select_from(reactions_table)
            .where(
                reactions_table.c.actor_id == actor_id,
                reactions_table.c.target_kind == target_kind.value,
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def delete_all_by_target(
        self, target_kind: ReactionTargetKind, target_id: UUID
    ) -> int:
        """Delete every reaction on one target."""
        return await self.delete_all_by_targets(target_kind, [target_id])

    async def delete_all_by_targets(
        self, target_kind: ReactionTargetKind, target_ids: Sequence[UUID]
    ) -> int:
        """Delete every reaction on many targets."""
        if not target_ids:
            return 0

        with logfire.span(
            "reaction_repository.delete_all_by_targets",
            target_kind=target_kind.value,
            count=len(target_ids),
        ):
            stmt = delete(reactions_table).where(
                reactions_table.c.target_kind == target_kind.value,
                reactions_table.c.target_id.in_(set(target_ids)),
            )
            result = await self.session.execute(stmt)
            await self.session.flush()
            return result.rowcount  # type: ignore[attr-defined]

    async def find_target_ids(self, target_kind: ReactionTargetKind) -> set[UUID]:
        """Find the distinct targets of one kind that have reactions."""
        stmt = (
            select(reactions_table.c.target_id)
            .where(reactions_table.c.target_kind == target_kind.value)
            .distinct()
        )
        result = await self.session.execute(stmt)
        return {row.target_id for row in result.all()}
